from sqlalchemy.engine import Engine

from project_tracker.core.exceptions import ProjectNotFoundError
from project_tracker.crud import projects as project_dao
from project_tracker.schemas.project import Project


def add_project(engine: Engine, project: Project) -> Project:
    return project_dao.insert_project(engine, project)


def fetch_all_projects(engine: Engine) -> list[Project]:
    return project_dao.fetch_all_projects(engine)


def fetch_project_by_id(engine: Engine, project_id: int) -> Project:
    project = project_dao.fetch_project_by_id(engine, project_id)
    if project is None:
        raise ProjectNotFoundError(project_id)
    return project


def modify_project_details(engine: Engine, project: Project) -> None:
    if not project_dao.modify_project_details(engine, project):
        raise ProjectNotFoundError(project.project_id)


def delete_project(engine: Engine, project_id: int) -> None:
    if not project_dao.delete_project(engine, project_id):
        raise ProjectNotFoundError(project_id)
