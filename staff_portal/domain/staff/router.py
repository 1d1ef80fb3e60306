"""Staff router - profile of the current staff member"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session

from ...auth import get_current_staff
from ...database import get_db
from ...models import User
from ...responses import message, response_success
from ...storage import ImageStorage, get_image_storage
from .schemas import ImageUpload, StaffProfileUpdate
from .service import StaffService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/staff", tags=["Staff Profile"])


def get_staff_service(
    db: Session = Depends(get_db),
    storage: ImageStorage = Depends(get_image_storage),
) -> StaffService:
    """Dependency injection for StaffService"""
    return StaffService(db, storage)


@router.get("/profile")
async def show_profile(
    current_staff: User = Depends(get_current_staff),
    service: StaffService = Depends(get_staff_service),
):
    """Get the current staff member's profile"""
    return response_success(message("user.show"), service.show_profile(current_staff))


@router.put("/profile")
async def update_profile(
    current_password: str = Form(...),
    new_password: Optional[str] = Form(None),
    name: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    address: Optional[str] = Form(None),
    phone: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    current_staff: User = Depends(get_current_staff),
    service: StaffService = Depends(get_staff_service),
):
    """Update the current staff member's profile (multipart form)"""
    try:
        data = StaffProfileUpdate(
            current_password=current_password,
            new_password=new_password or None,
            name=name,
            email=email,
            address=address,
            phone=phone,
        )
    except ValidationError as e:
        raise RequestValidationError(e.errors()) from e

    upload = None
    if image is not None and image.filename:
        upload = ImageUpload(
            filename=image.filename,
            content_type=image.content_type,
            content=await image.read(),
        )

    profile = service.update_profile(current_staff, data, upload)
    return response_success(message("user.updated"), profile)
