"""Staff repository - Database operations for staff users"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import User


class StaffRepository:
    """Repository for staff database operations"""

    @staticmethod
    def get_by_id(db: Session, staff_id: int) -> Optional[User]:
        return db.query(User).filter(User.id == staff_id).first()

    @staticmethod
    def get_by_email(db: Session, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == email).first()

    @staticmethod
    def create_staff(db: Session, store_id: int, **staff_data) -> User:
        """Create a staff member (caller commits)"""
        staff = User(store_id=store_id, **staff_data)
        db.add(staff)
        db.flush()
        return staff

    @staticmethod
    def update_staff(db: Session, staff: User, **updates) -> User:
        """Apply field updates (caller commits)"""
        for key, value in updates.items():
            if hasattr(staff, key):
                setattr(staff, key, value)
        db.flush()
        return staff
