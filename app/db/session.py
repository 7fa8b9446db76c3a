from typing import AsyncGenerator
import logging
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool
from app.core.config import get_settings
from app.core.exceptions import BusinessLogicError

logger = logging.getLogger(__name__)


def get_engine() -> AsyncEngine:
    """Create and return the async SQLAlchemy engine.

    Returns:
        Async engine instance.
    """

    settings = get_settings()
    engine = create_async_engine(str(settings.DB_URL), echo=settings.DB_ECHO, poolclass=NullPool)
    return engine


engine = get_engine()
SessionLocal = async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency that yields an `AsyncSession` and ensures cleanup.

    One session per request; it is closed on every exit path.

    Yields:
        AsyncSession: Database session for request scope.
    """

    async with SessionLocal() as session:
        try:
            yield session
        except Exception as exc:
            # Not-found and other business outcomes are answered by the app, not faults
            if isinstance(exc, BusinessLogicError):
                logger.debug("Business error in request: %s", exc.message)
            else:
                logger.exception("DB session error: %s", exc)
            raise
