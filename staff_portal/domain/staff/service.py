"""Staff service - Business logic for the staff profile"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ...exceptions import (
    AuthenticationFailed,
    NotFound,
    StaffPortalError,
    UnexpectedFailure,
    ValidationFailure,
)
from ...models import User
from ...responses import message
from ...security_utils import hash_password, verify_password
from ...shared.validators import validate_email
from ...storage import ImageStorage, validate_image_file
from ..stores.repository import StoreRepository
from .repository import StaffRepository
from .schemas import ImageUpload, StaffProfileUpdate

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("name", "email", "address", "phone")


def serialize_profile(staff: User) -> dict:
    return {
        "id": staff.id,
        "email": staff.email,
        "name": staff.name,
        "image": staff.image,
        "address": staff.address,
        "phone": staff.phone,
        "store_id": staff.store_id,
        "created_at": staff.created_at,
    }


class StaffService:
    """Service layer for staff profile business logic"""

    def __init__(self, db: Session, storage: Optional[ImageStorage] = None):
        self.db = db
        self.storage = storage
        self.repo = StaffRepository()

    def show_profile(self, staff: User) -> dict:
        return serialize_profile(staff)

    def update_profile(
        self, staff: User, data: StaffProfileUpdate, image: Optional[ImageUpload] = None
    ) -> dict:
        """
        Update profile fields, optionally rotating the password and image.

        The current password must match. Field changes, the new password hash
        and the new image key are committed together or not at all.
        """
        if not verify_password(data.current_password, staff.password):
            logger.warning(f"⚠️ Profile update with wrong current password for staff {staff.id}")
            raise AuthenticationFailed(message("auth.failed"))

        updates = data.model_dump(include=set(PROFILE_FIELDS), exclude_none=True)

        if "email" in updates and updates["email"] != staff.email:
            other = self.repo.get_by_email(self.db, updates["email"])
            if other and other.id != staff.id:
                raise ValidationFailure(message("user.email_taken"), {"field": "email"})

        if data.new_password:
            updates["password"] = hash_password(data.new_password)

        if image is not None:
            is_valid, error = validate_image_file(image.filename, len(image.content), image.content_type)
            if not is_valid:
                raise ValidationFailure(error, {"field": "image"})

        old_image = staff.image
        new_image = None
        try:
            if image is not None:
                new_image = self.storage.upload(staff.id, image.filename, image.content, image.content_type)
                updates["image"] = new_image

            self.repo.update_staff(self.db, staff, **updates)
            self.db.commit()
        except StaffPortalError:
            self.db.rollback()
            self._discard(new_image)
            raise
        except Exception as e:
            self.db.rollback()
            self._discard(new_image)
            logger.error(f"❌ Profile update failed for staff {staff.id}: {e}")
            raise UnexpectedFailure(message("user.error"), {"detail": str(e)}) from e

        if new_image and old_image:
            self.storage.delete(old_image)

        self.db.refresh(staff)
        changed = sorted(k for k in updates if k != "password")
        logger.info(
            f"✅ Profile updated for staff {staff.id}: fields={changed} "
            f"password_changed={'password' in updates}"
        )
        return serialize_profile(staff)

    def create_staff(
        self,
        store_id: int,
        email: str,
        name: str,
        password: str,
        address: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> User:
        """Register a staff member for a store"""
        try:
            email = validate_email(email)
        except ValueError as e:
            raise ValidationFailure(str(e), {"field": "email"}) from e

        if not StoreRepository.get_store(self.db, store_id):
            raise NotFound(message("store.not_found"), {"store_id": store_id})

        if self.repo.get_by_email(self.db, email):
            raise ValidationFailure(message("user.email_taken"), {"field": "email"})

        try:
            staff = self.repo.create_staff(
                self.db,
                store_id,
                email=email,
                name=name,
                password=hash_password(password),
                address=address,
                phone=phone,
            )
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(f"❌ Failed to create staff {email}: {e}")
            raise UnexpectedFailure(str(e)) from e

        logger.info(f"🆕 Staff created: id={staff.id} email={staff.email} store={store_id}")
        return staff

    def _discard(self, key: Optional[str]) -> None:
        if key:
            self.storage.delete(key)
