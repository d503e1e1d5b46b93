class DbError(Exception):
    """Raised for any failure talking to the relational store.

    The underlying driver / SQLAlchemy exception, when there is one, is kept
    on ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, message: str | Exception, cause: Exception | None = None):
        if isinstance(message, Exception) and cause is None:
            cause = message
        super().__init__(str(message))
        self.cause = cause


class ProjectNotFoundError(LookupError):
    def __init__(self, project_id: int | None):
        super().__init__(f"Project with ID={project_id} does not exist.")
        self.project_id = project_id
