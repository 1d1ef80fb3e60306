"""Store router - opening hours of the staff member's store"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...auth import get_current_staff
from ...database import get_db
from ...models import User
from ...responses import message, response_success
from .service import StoreService

router = APIRouter(prefix="/staff", tags=["Store Hours"])


def get_store_service(db: Session = Depends(get_db)) -> StoreService:
    """Dependency injection for StoreService"""
    return StoreService(db)


@router.get("/store-hours")
async def view_store_opening_hours(
    current_staff: User = Depends(get_current_staff),
    service: StoreService = Depends(get_store_service),
):
    """Opening hours of the store the current staff member works at"""
    data = service.get_opening_hours(current_staff.store_id)
    return response_success(message("openingHours.show"), data)
