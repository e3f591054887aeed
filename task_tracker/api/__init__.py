"""
API module for the Task Tracker
HTTP routes and request dependencies
"""
