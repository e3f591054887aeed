"""
Reference data routes for the Task Tracker
Read-only lists of users and categories
"""
from typing import List

from fastapi import APIRouter, Depends

from ...models.category import Category
from ...models.user import User
from ...services.reference_service import ReferenceService
from ..deps import get_reference_service


router = APIRouter()


@router.get("/users", response_model=List[User])
async def list_users(reference: ReferenceService = Depends(get_reference_service)):
    """Get all users."""
    return reference.list_users()


@router.get("/categories", response_model=List[Category])
async def list_categories(reference: ReferenceService = Depends(get_reference_service)):
    """Get all task categories."""
    return reference.list_categories()
