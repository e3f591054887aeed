"""
Category model for the Task Tracker
Read-only reference data; tasks point at categories by id without integrity checks
"""
from sqlmodel import Field, SQLModel


class Category(SQLModel):
    """A task category"""
    id: str = Field(min_length=1)
    name: str = Field(min_length=1, max_length=100)
