from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.engine import Connection, Engine, RootTransaction
from sqlalchemy.exc import SQLAlchemyError

from project_tracker.core.exceptions import DbError
from project_tracker.core.logging import logger
from project_tracker.db.session import get_connection


def start_transaction(conn: Connection) -> RootTransaction:
    return conn.begin()


def commit_transaction(trans: RootTransaction) -> None:
    trans.commit()


def rollback_transaction(trans: RootTransaction) -> None:
    # A failed rollback must not hide the error that triggered it
    try:
        trans.rollback()
    except SQLAlchemyError as e:
        logger.exception("transaction_rollback_failed", error=str(e))


@contextmanager
def transaction(engine: Engine, op: str) -> Iterator[Connection]:
    """One connection, one transaction.

    Commits when the block exits cleanly. On any exception the transaction is
    rolled back and the error is re-raised as DbError (an existing DbError is
    re-raised untouched). The connection is closed on every path.
    """
    try:
        conn = get_connection(engine)
    except SQLAlchemyError as e:
        logger.error("db_connect_failed", op=op, error=str(e))
        raise DbError(e) from e

    with conn:
        try:
            trans = start_transaction(conn)
        except SQLAlchemyError as e:
            logger.error("transaction_begin_failed", op=op, error=str(e))
            raise DbError(e) from e

        try:
            yield conn
            commit_transaction(trans)
        except DbError:
            rollback_transaction(trans)
            raise
        except Exception as e:
            rollback_transaction(trans)
            logger.warning("transaction_rolled_back", op=op, error=str(e))
            raise DbError(e) from e
