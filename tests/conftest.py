"""Shared fixtures: subject catalogs and a throwaway SQLite database."""

import pytest
from fastapi.testclient import TestClient

import server
from server import database
from planner.schemas import Subject


@pytest.fixture
def neet_subjects():
    return [
        Subject(key="physics", label="Physics"),
        Subject(key="chemistry", label="Chemistry"),
        Subject(key="biology", label="Biology"),
    ]


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    path = str(tmp_path / "plans.db")
    monkeypatch.setattr(database, "DB_PATH", path)
    return path


@pytest.fixture
def db(db_path):
    database.init_db()
    conn = database.get_db()
    yield conn
    conn.close()


@pytest.fixture
def client(db_path):
    with TestClient(server.app) as c:
        yield c
