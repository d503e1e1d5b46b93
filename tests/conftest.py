from decimal import Decimal

import pytest
from sqlalchemy import insert
from sqlalchemy.pool import StaticPool

from project_tracker.core.logging import configure_logging
from project_tracker.db import models
from project_tracker.db.base import Base
from project_tracker.db.session import build_engine
from project_tracker.schemas.project import Project

configure_logging("dev", "WARNING")


@pytest.fixture
def engine():
    # one shared in-memory database for every connection the code opens
    eng = build_engine("sqlite://", poolclass=StaticPool, connect_args={"check_same_thread": False})
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def make_project():
    def _make(name="Hang a door", estimated="4.00", actual="5.50", difficulty=3, notes="Use the door hangers"):
        return Project(
            project_name=name,
            estimated_hours=Decimal(estimated),
            actual_hours=Decimal(actual),
            difficulty=difficulty,
            notes=notes,
        )
    return _make


def add_materials(engine, project_id, names):
    with engine.begin() as conn:
        conn.execute(
            insert(models.Material.__table__),
            [{"project_id": project_id, "material_name": n, "num_required": 1, "cost": Decimal("2.50")} for n in names],
        )


def add_steps(engine, project_id, texts):
    with engine.begin() as conn:
        conn.execute(
            insert(models.Step.__table__),
            [{"project_id": project_id, "step_text": t, "step_order": i} for i, t in enumerate(texts, start=1)],
        )


def add_categories(engine, names) -> dict[str, int]:
    ids = {}
    with engine.begin() as conn:
        for n in names:
            result = conn.execute(insert(models.Category.__table__).values(category_name=n))
            ids[n] = result.inserted_primary_key[0]
    return ids


def link_categories(engine, project_id, category_ids):
    with engine.begin() as conn:
        conn.execute(
            insert(models.ProjectCategory.__table__),
            [{"project_id": project_id, "category_id": c} for c in category_ids],
        )
