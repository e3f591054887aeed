"""
User model for the Task Tracker
Read-only reference data; tasks point at users by id without integrity checks
"""
from typing import Optional
from sqlmodel import Field, SQLModel


class User(SQLModel):
    """A user that tasks may be assigned to"""
    id: str = Field(min_length=1)
    name: str = Field(min_length=1, max_length=200)
    email: Optional[str] = Field(default=None, max_length=255)
