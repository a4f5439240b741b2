import os

# Must be set before voyager.db.database builds its engine
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["CREATE_TABLES"] = "true"

import pytest
from fastapi.testclient import TestClient

from voyager.db.database import Base, engine, SessionLocal
from voyager.fast_app import app
from voyager.internal.dependencies import TripDirectory, GroupChatSync, JoinRequestWorkflow, NotificationProjector


@pytest.fixture(autouse=True)
def clean_tables():
  Base.metadata.drop_all(bind=engine)
  Base.metadata.create_all(bind=engine)
  yield


@pytest.fixture
def db():
  session = SessionLocal()
  yield session
  session.close()


@pytest.fixture
def trips(db):
  return TripDirectory(db)


@pytest.fixture
def chat_sync(db):
  return GroupChatSync(db)


@pytest.fixture
def workflow(db, trips, chat_sync):
  return JoinRequestWorkflow(db, trips, chat_sync)


@pytest.fixture
def projector(db):
  return NotificationProjector(db)


@pytest.fixture
def group_trip(trips):
  return trips.create(title="Alps Roadtrip", creator_username="carol", trip_type="group",
                      origin="Vienna", destination="Innsbruck")


@pytest.fixture
def solo_trip(trips):
  return trips.create(title="Weekend in Prague", creator_username="carol", trip_type="solo",
                      destination="Prague")


@pytest.fixture
def client():
  with TestClient(app) as test_client:
    yield test_client
