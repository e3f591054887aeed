"""
Route modules for the Task Tracker
"""
from .tasks import router as tasks_router
from .reference import router as reference_router
from .pages import router as pages_router

__all__ = ["tasks_router", "reference_router", "pages_router"]
