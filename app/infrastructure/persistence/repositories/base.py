"""Base repository: session-per-query access and error translation."""

from collections.abc import Awaitable, Callable
from typing import TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.domain.exceptions import UpstreamError
from app.infrastructure.persistence.database import get_session_factory

T = TypeVar("T")


class BaseRepository:
    """Read-only repository over a session factory.

    Each query opens its own session, so two calls on the same repository
    may be awaited concurrently. Without an explicit factory the shared one
    is resolved on first query; an unconfigured database then fails that
    query with ConfigurationError instead of failing construction.
    Database failures surface as UpstreamError carrying the driver message.
    """

    def __init__(
        self, session_factory: async_sessionmaker[AsyncSession] | None = None
    ) -> None:
        self._session_factory = session_factory

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        if self._session_factory is None:
            self._session_factory = get_session_factory()
        return self._session_factory

    async def _run(
        self,
        query: Callable[[AsyncSession], Awaitable[T]],
        failure_message: str,
    ) -> T:
        session_factory = self.session_factory
        try:
            async with session_factory() as session:
                return await query(session)
        except SQLAlchemyError as e:
            reason = str(getattr(e, "orig", None) or e)
            raise UpstreamError(failure_message, reason) from e
