from project_tracker.console.app import ProjectsApp
from project_tracker.core.config import settings
from project_tracker.core.logging import configure_logging, logger
from project_tracker.db import models  # noqa: F401  registers every table on Base.metadata
from project_tracker.db.base import Base
from project_tracker.db.session import engine
from project_tracker.services.seed import seed_demo


def main() -> None:
    configure_logging(settings.ENV, settings.LOG_LEVEL)

    # Ensure tables exist for dev-only convenience; elsewhere the schema is provisioned externally
    if settings.ENV == "dev":
        Base.metadata.create_all(bind=engine)
        if settings.SEED_DEMO:
            seed_demo(engine)

    logger.info("app_started", env=settings.ENV)
    ProjectsApp(engine).process_user_selections()


if __name__ == "__main__":
    main()
