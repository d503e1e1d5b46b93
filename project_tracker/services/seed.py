from sqlalchemy import func, insert, select
from sqlalchemy.engine import Engine

from project_tracker.core.config import settings
from project_tracker.core.logging import logger
from project_tracker.crud.base import transaction
from project_tracker.db.models.category import Category


def seed_demo(engine: Engine) -> int:
    """Insert the demo categories when the category table is empty."""
    names = [n.strip() for n in settings.DEMO_CATEGORIES.split(",") if n.strip()]
    if not names:
        return 0

    with transaction(engine, "seed_demo") as conn:
        existing = conn.execute(select(func.count()).select_from(Category.__table__)).scalar_one()
        if existing:
            return 0
        conn.execute(insert(Category.__table__), [{"category_name": n} for n in names])

    logger.info("demo_categories_seeded", count=len(names))
    return len(names)
