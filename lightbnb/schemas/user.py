"""
Pydantic schemas for user input.
Values are stored exactly as given; uniqueness of email is left to the store.
"""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Schema for creating a new user."""
    
    name: str = Field(
        ...,
        description="User's display name",
        examples=["Devin Sanders"]
    )
    
    email: str = Field(
        ...,
        description="User's email address",
        examples=["tristanjacobs@gmail.com"]
    )
    
    password: str = Field(
        ...,
        description="Password hash produced upstream"
    )
