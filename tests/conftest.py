import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("DB_LOG_SLOW_QUERIES", "false")

from datetime import time  # noqa: E402

import pytest  # noqa: E402
from botocore.exceptions import ClientError  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from staff_portal.database import Base, get_db  # noqa: E402
from staff_portal.main import app  # noqa: E402
from staff_portal.models import OpeningHour, Store, User, Weekday  # noqa: E402
from staff_portal.security_utils import create_access_token, hash_password  # noqa: E402
from staff_portal.storage import ImageStorage, get_image_storage  # noqa: E402

STAFF_PASSWORD = "correct-horse-battery"


class FakeS3Client:
    """Records put/delete calls made through ImageStorage."""

    def __init__(self):
        self.objects: dict[str, bytes] = {}
        self.deleted: list[str] = []
        self.fail_uploads = False

    def put_object(self, Bucket, Key, Body, ContentType):
        if self.fail_uploads:
            raise ClientError({"Error": {"Code": "503", "Message": "Slow Down"}}, "PutObject")
        self.objects[Key] = Body

    def delete_object(self, Bucket, Key):
        self.deleted.append(Key)
        self.objects.pop(Key, None)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def s3_client():
    return FakeS3Client()


@pytest.fixture
def storage(s3_client):
    return ImageStorage(client=s3_client, bucket="test-bucket")


@pytest.fixture
def client(session_factory, storage):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_image_storage] = lambda: storage
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def store(db):
    store = Store(name="Downtown Salon", address="12 Main Street")
    db.add(store)
    db.commit()
    return store


@pytest.fixture
def staff(db, store):
    staff = User(
        store_id=store.id,
        email="linh@example.com",
        name="Linh Tran",
        password=hash_password(STAFF_PASSWORD),
        address="3 River Road",
        phone="+84901234567",
    )
    db.add(staff)
    db.commit()
    return staff


@pytest.fixture
def auth_headers(staff):
    return {"Authorization": f"Bearer {create_access_token(staff.id)}"}


def add_opening_hours(db, store_id, day, opening, closing):
    hour = OpeningHour(
        store_id=store_id,
        day=Weekday(day),
        opening_time=time.fromisoformat(opening),
        closing_time=time.fromisoformat(closing),
    )
    db.add(hour)
    db.commit()
    return hour


@pytest.fixture
def monday_hours(db, store):
    return add_opening_hours(db, store.id, "Monday", "09:00:00", "18:00:00")
