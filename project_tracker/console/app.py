from sqlalchemy.engine import Engine

from project_tracker.console.prompts import get_decimal_input, get_int_input, get_string_input
from project_tracker.core.logging import logger
from project_tracker.schemas.project import Project
from project_tracker.services import projects as project_service

OPERATIONS = [
    "1) Add a project",
    "2) List projects",
    "3) Select a project",
    "4) Update project details",
    "5) Delete a project",
]


class ProjectsApp:
    """Menu loop over the project service. Blank input at the menu quits."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.cur_project: Project | None = None
        self._actions = {
            1: self.create_project,
            2: self.list_projects,
            3: self.select_project,
            4: self.update_project_details,
            5: self.delete_project,
        }

    def process_user_selections(self) -> None:
        done = False
        while not done:
            try:
                selection = self.get_user_selection()
                if selection == -1:
                    done = self.exit_menu()
                elif selection in self._actions:
                    self._actions[selection]()
                else:
                    print(f"\n{selection} is not a valid selection. Try again.")
            except EOFError:
                done = self.exit_menu()
            except Exception as e:
                # the loop survives any failed operation
                logger.info("menu_operation_failed", error_type=type(e).__name__, error=str(e))
                print(f"\nError: {e} Try again.")

    def exit_menu(self) -> bool:
        print("Exiting the menu.")
        return True

    def get_user_selection(self) -> int:
        self.print_operations()
        selection = get_int_input("Enter a menu selection")
        return -1 if selection is None else selection

    def print_operations(self) -> None:
        print("\nThese are the available selections. Press the Enter key to quit:")
        for line in OPERATIONS:
            print(f"  {line}")

        if self.cur_project is None:
            print("\nYou are not working with a project.")
        else:
            print(f"\nYou are working with project: {self.cur_project}")

    def create_project(self) -> None:
        project = Project(
            project_name=get_string_input("Enter the project name"),
            estimated_hours=get_decimal_input("Enter the estimated hours"),
            actual_hours=get_decimal_input("Enter the actual hours"),
            difficulty=get_int_input("Enter the project difficulty (1-5)"),
            notes=get_string_input("Enter the project notes"),
        )

        db_project = project_service.add_project(self.engine, project)
        print(f"You have successfully created project: {db_project}")

    def list_projects(self) -> None:
        projects = project_service.fetch_all_projects(self.engine)

        print("\nProjects:")
        for project in projects:
            print(f"   {project.project_id}: {project.project_name}")

    def select_project(self) -> None:
        self.list_projects()
        project_id = get_int_input("Enter a project ID to select a project")
        if project_id is None:
            return

        self.cur_project = None
        # raises ProjectNotFoundError for an unknown id
        self.cur_project = project_service.fetch_project_by_id(self.engine, project_id)

    def update_project_details(self) -> None:
        if self.cur_project is None:
            print("\nPlease select a project.")
            return

        cur = self.cur_project
        name = get_string_input(f"Enter the project name [{cur.project_name}]")
        estimated_hours = get_decimal_input(f"Enter the estimated hours [{cur.estimated_hours}]")
        actual_hours = get_decimal_input(f"Enter the actual hours [{cur.actual_hours}]")
        difficulty = get_int_input(f"Enter the project difficulty (1-5) [{cur.difficulty}]")
        notes = get_string_input(f"Enter the project notes [{cur.notes}]")

        project = Project(
            project_id=cur.project_id,
            project_name=cur.project_name if name is None else name,
            estimated_hours=cur.estimated_hours if estimated_hours is None else estimated_hours,
            actual_hours=cur.actual_hours if actual_hours is None else actual_hours,
            difficulty=cur.difficulty if difficulty is None else difficulty,
            notes=cur.notes if notes is None else notes,
        )

        project_service.modify_project_details(self.engine, project)
        self.cur_project = project_service.fetch_project_by_id(self.engine, cur.project_id)

    def delete_project(self) -> None:
        self.list_projects()
        project_id = get_int_input("Enter the ID of the project to delete")
        if project_id is None:
            return

        project_service.delete_project(self.engine, project_id)
        print(f"Project {project_id} was deleted successfully.")

        if self.cur_project is not None and self.cur_project.project_id == project_id:
            self.cur_project = None
