import os
# Override DATABASE_URL before any app imports to avoid PostgreSQL driver requirement
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["LOG_JSON"] = "false"
os.environ.pop("CANONICAL_CRITERIA_ORDER", None)

import uuid
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from appraisal.platform.database import Base, enable_sqlite_foreign_keys, get_db
from appraisal.main import app
from appraisal.models.criterion import Criterion, CriterionType
from appraisal.models.employee import Employee
from appraisal.scripts.seed_criteria import REFERENCE_CRITERIA

SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Enable foreign key support (and cascades) for SQLite
enable_sqlite_foreign_keys(engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="function")
def db():
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    yield db
    db.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Factory helpers
# ---------------------------------------------------------------------------

def _unique_suffix() -> str:
    return uuid.uuid4().hex[:8]


@pytest.fixture
def make_employee(db):
    def _make(name=None, **overrides):
        employee = Employee(
            name=name or f"Employee {_unique_suffix()}",
            position=overrides.pop("position", "Staff"),
            department=overrides.pop("department", "Operasional"),
            **overrides,
        )
        db.add(employee)
        db.commit()
        db.refresh(employee)
        return employee

    return _make


@pytest.fixture
def make_criterion(db):
    def _make(name, type=CriterionType.BENEFIT, scale="1-5", weight=10.0, category="Kinerja Inti", **overrides):
        criterion = Criterion(
            name=name,
            type=type,
            scale=scale,
            weight=weight,
            category=category,
            **overrides,
        )
        db.add(criterion)
        db.commit()
        db.refresh(criterion)
        return criterion

    return _make


@pytest.fixture
def reference_criteria(db):
    """The 13 canonical criteria as seeded for a fresh installation."""
    created = []
    for attrs in REFERENCE_CRITERIA:
        criterion = Criterion(**attrs)
        db.add(criterion)
        created.append(criterion)
    db.commit()
    for criterion in created:
        db.refresh(criterion)
    return {criterion.name: criterion for criterion in created}
