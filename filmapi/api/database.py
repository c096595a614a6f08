"""Database session dependency for FastAPI.

One transactional scope per request: the session commits as soon as the
handler returns, before the response is sent, and rolls back if anything
raised, including catalog errors that are later turned into 404/400
responses.
"""

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from filmapi.database.connection import get_session


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency for database sessions.

    Yields:
        Database session bound to the request transaction.

    Example:
        @router.get("/characters")
        def list_characters(db: DbSession):
            return CharacterService(db).get_all()
    """
    yield from get_session()


# The session scope closes when the endpoint returns, so the commit (or the
# error it raises) happens before the response is sent.
DbSession = Annotated[Session, Depends(get_db, scope="function")]
