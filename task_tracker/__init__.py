"""
Task Tracker
A small task-tracking web application backed by a file-based task store
"""
__version__ = "0.1.0"
