from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Connection, Engine

from project_tracker.core.logging import logger
from project_tracker.crud.base import transaction
from project_tracker.db.models.category import Category as CategoryModel
from project_tracker.db.models.material import Material as MaterialModel
from project_tracker.db.models.project import Project as ProjectModel
from project_tracker.db.models.project_category import ProjectCategory as ProjectCategoryModel
from project_tracker.db.models.step import Step as StepModel
from project_tracker.schemas.project import Category, Material, Project, Step

CATEGORY_TABLE = CategoryModel.__table__
MATERIAL_TABLE = MaterialModel.__table__
PROJECT_TABLE = ProjectModel.__table__
PROJECT_CATEGORY_TABLE = ProjectCategoryModel.__table__
STEP_TABLE = StepModel.__table__


def _row_values(project: Project) -> dict:
    return {
        "project_name": project.project_name,
        "estimated_hours": project.estimated_hours,
        "actual_hours": project.actual_hours,
        "difficulty": project.difficulty,
        "notes": project.notes,
    }


def _fetch_materials_for_project(conn: Connection, project_id: int) -> list[Material]:
    stmt = select(MATERIAL_TABLE).where(MATERIAL_TABLE.c.project_id == project_id)
    return [Material(**row._mapping) for row in conn.execute(stmt)]


def _fetch_steps_for_project(conn: Connection, project_id: int) -> list[Step]:
    stmt = select(STEP_TABLE).where(STEP_TABLE.c.project_id == project_id)
    return [Step(**row._mapping) for row in conn.execute(stmt)]


def _fetch_categories_for_project(conn: Connection, project_id: int) -> list[Category]:
    stmt = (
        select(CATEGORY_TABLE)
        .join(PROJECT_CATEGORY_TABLE, PROJECT_CATEGORY_TABLE.c.category_id == CATEGORY_TABLE.c.category_id)
        .where(PROJECT_CATEGORY_TABLE.c.project_id == project_id)
    )
    return [Category(**row._mapping) for row in conn.execute(stmt)]


def fetch_project_by_id(engine: Engine, project_id: int) -> Project | None:
    """Project row plus materials, steps and categories, read in one transaction.

    Returns None when no project has this id. The aggregate is only built once
    all four queries have succeeded.
    """
    stmt = select(PROJECT_TABLE).where(PROJECT_TABLE.c.project_id == project_id)

    with transaction(engine, "fetch_project_by_id") as conn:
        row = conn.execute(stmt).one_or_none()
        if row is None:
            return None

        materials = _fetch_materials_for_project(conn, project_id)
        steps = _fetch_steps_for_project(conn, project_id)
        categories = _fetch_categories_for_project(conn, project_id)

    return Project(**row._mapping, materials=materials, steps=steps, categories=categories)


def insert_project(engine: Engine, project: Project) -> Project:
    stmt = insert(PROJECT_TABLE).values(**_row_values(project))

    with transaction(engine, "insert_project") as conn:
        result = conn.execute(stmt)
        # generated key of this INSERT on this connection (RETURNING or lastrowid)
        project_id = result.inserted_primary_key[0]

    project.project_id = project_id
    logger.info("project_inserted", project_id=project_id)
    return project


def fetch_all_projects(engine: Engine) -> list[Project]:
    stmt = select(PROJECT_TABLE).order_by(PROJECT_TABLE.c.project_name)

    with transaction(engine, "fetch_all_projects") as conn:
        return [Project(**row._mapping) for row in conn.execute(stmt)]


def modify_project_details(engine: Engine, project: Project) -> bool:
    stmt = (
        update(PROJECT_TABLE)
        .where(PROJECT_TABLE.c.project_id == project.project_id)
        .values(**_row_values(project))
    )

    with transaction(engine, "modify_project_details") as conn:
        modified = conn.execute(stmt).rowcount == 1

    logger.info("project_modified", project_id=project.project_id, modified=modified)
    return modified


def delete_project(engine: Engine, project_id: int) -> bool:
    stmt = delete(PROJECT_TABLE).where(PROJECT_TABLE.c.project_id == project_id)

    with transaction(engine, "delete_project") as conn:
        deleted = conn.execute(stmt).rowcount == 1

    logger.info("project_deleted", project_id=project_id, deleted=deleted)
    return deleted
