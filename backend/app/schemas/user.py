"""
User Pydantic schemas for request/response validation
"""
from datetime import datetime
from typing import ClassVar, Optional

from pydantic import BaseModel, EmailStr

from backend.app.schemas.common import PartialUpdate


class UserCreate(BaseModel):
    """Schema for creating a user profile"""
    email: EmailStr
    first_name: str
    last_name: str
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None


class UserUpdate(PartialUpdate):
    """Schema for a sparse user profile update"""
    non_nullable: ClassVar[frozenset[str]] = frozenset({"email", "first_name", "last_name"})

    email: Optional[EmailStr] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None


class UserResponse(BaseModel):
    """Schema for user response"""
    id: int
    email: str
    first_name: str
    last_name: str
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
