"""
Operator command line for the staff portal
Usage: staff-portal <command> [options]
"""

import argparse
import logging
import sys
from typing import Optional

from . import models  # noqa: F401 - register tables with Base
from .database import Base, SessionLocal, engine
from .domain.schedules.service import SchedulingService
from .domain.staff.repository import StaffRepository
from .domain.staff.service import StaffService
from .domain.stores.service import StoreService
from .exceptions import NotFound, StaffPortalError
from .models import Weekday
from .security_utils import create_access_token

logger = logging.getLogger(__name__)

WEEKDAYS = [d.value for d in Weekday]


def init_db(_args, _db) -> None:
    Base.metadata.create_all(bind=engine, checkfirst=True)
    logger.info("✅ Database tables created")


def create_store(args, db) -> None:
    store = StoreService(db).create_store(args.name, args.address)
    print(store.id)


def create_staff(args, db) -> None:
    staff = StaffService(db).create_staff(
        store_id=args.store_id,
        email=args.email,
        name=args.name,
        password=args.password,
        address=args.address,
        phone=args.phone,
    )
    print(staff.id)


def set_hours(args, db) -> None:
    StoreService(db).set_opening_hours(args.store_id, args.day, args.opening_time, args.closing_time)


def invalidate_schedule(args, db) -> None:
    SchedulingService(db).invalidate_schedule(args.staff_id, args.day)


def issue_token(args, db) -> None:
    if not StaffRepository.get_by_id(db, args.staff_id):
        raise NotFound(f"Staff {args.staff_id} not found")
    print(create_access_token(args.staff_id))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="staff-portal", description="Staff portal operator tools")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("init-db", help="Create database tables")
    p.set_defaults(handler=init_db)

    p = sub.add_parser("create-store", help="Create a store and print its id")
    p.add_argument("name")
    p.add_argument("--address")
    p.set_defaults(handler=create_store)

    p = sub.add_parser("create-staff", help="Create a staff member and print its id")
    p.add_argument("--store-id", type=int, required=True)
    p.add_argument("--email", required=True)
    p.add_argument("--name", required=True)
    p.add_argument("--password", required=True)
    p.add_argument("--address")
    p.add_argument("--phone")
    p.set_defaults(handler=create_staff)

    p = sub.add_parser("set-hours", help="Set a store's opening hours for one weekday")
    p.add_argument("--store-id", type=int, required=True)
    p.add_argument("--day", choices=WEEKDAYS, required=True)
    p.add_argument("--open", dest="opening_time", required=True, help="HH:MM:SS")
    p.add_argument("--close", dest="closing_time", required=True, help="HH:MM:SS")
    p.set_defaults(handler=set_hours)

    p = sub.add_parser("invalidate-schedule", help="Flag a staff schedule as needing a check")
    p.add_argument("--staff-id", type=int, required=True)
    p.add_argument("--day", choices=WEEKDAYS, required=True)
    p.set_defaults(handler=invalidate_schedule)

    p = sub.add_parser("issue-token", help="Print an access token for a staff member")
    p.add_argument("--staff-id", type=int, required=True)
    p.set_defaults(handler=issue_token)

    return parser


def main(argv: Optional[list[str]] = None, session_factory=SessionLocal) -> int:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    args = build_parser().parse_args(argv)

    db = session_factory()
    try:
        args.handler(args, db)
    except StaffPortalError as e:
        logger.error(f"❌ {e.code}: {e.message} {e.details or ''}")
        return 1
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
