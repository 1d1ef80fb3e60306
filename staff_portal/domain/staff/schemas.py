"""Staff domain schemas - Pydantic models for validation"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ...shared.validators import validate_email, validate_phone


class StaffProfileUpdate(BaseModel):
    """Schema for updating the current staff member's profile"""

    current_password: str = Field(..., min_length=1)
    new_password: Optional[str] = Field(None, min_length=8, max_length=72)
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[str] = None
    address: Optional[str] = Field(None, max_length=500)
    phone: Optional[str] = None

    @field_validator("email")
    @classmethod
    def check_email(cls, v):
        return validate_email(v)

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v):
        return validate_phone(v)

    @field_validator("name", "address")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if v else v


class ImageUpload(BaseModel):
    """An uploaded profile image, already read into memory"""

    filename: str
    content_type: Optional[str] = None
    content: bytes
