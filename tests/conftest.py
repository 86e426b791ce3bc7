import os

# Must be set before any service module is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["EVENTS_ENABLED"] = "false"
os.environ["JWT_SECRET"] = "test-secret"

import pytest
from fastapi.testclient import TestClient
from pika.exceptions import AMQPConnectionError
from sqlmodel import Session, SQLModel

import api
import publisher
from app import app
from database import engine


@pytest.fixture(autouse=True)
def reset_db():
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield


@pytest.fixture
def db():
    with Session(engine) as s:
        yield s


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def events(monkeypatch):
    """Capture published events instead of sending them to RabbitMQ."""
    sent = []
    monkeypatch.setattr(api, "publish_event", lambda event_type, payload: sent.append((event_type, payload)))
    return sent


@pytest.fixture
def broker_down(monkeypatch):
    """Enable publishing against a RabbitMQ that refuses every connection."""
    def refuse(params):
        raise AMQPConnectionError("connection refused")

    monkeypatch.setattr(publisher, "EVENTS_ENABLED", True)
    monkeypatch.setattr(publisher.pika, "BlockingConnection", refuse)
