"""
QuickNotes Backend — Database Engine & Startup Retry
======================================================

What:  Declarative base, async engine factory, and the bounded retry loop
       used to bring the backing store up at startup.
How:   create_engine() builds an AsyncEngine from Settings; SqlNoteStore owns
       the engine it gets back. retry_initialization() wraps any async
       "make the resource ready" callable in a tenacity loop with a fixed
       delay and a hard attempt cap.
Who:   SqlNoteStore (engine + sessions) and every store's initialize().

Connection Pooling:
    pool_size / max_overflow / pool_pre_ping come from Settings for server
    databases. SQLite URLs skip them: aiosqlite picks its own pool class and
    rejects the sizing arguments.
"""

import logging
from typing import Awaitable, Callable, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from tenacity import (
    AsyncRetrying,
    RetryError,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from quicknotes.config import Settings
from quicknotes.exceptions import InitializationError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Models register with Base.metadata, which SqlNoteStore.initialize()
    uses to create missing tables.
    """
    pass


# ── Engine Configuration ──────────────────────────────────────────────────
def create_engine(settings: Settings) -> AsyncEngine:
    """
    Build the async engine for the configured database.

    Echoes SQL when LOG_LEVEL is DEBUG.
    """
    engine_kwargs = {"echo": settings.log_level == "DEBUG"}
    if not settings.is_sqlite:
        engine_kwargs.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return create_async_engine(settings.sqlalchemy_url, **engine_kwargs)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Session factory bound to `engine`.

    expire_on_commit=False keeps attribute access working on ORM objects
    after their transaction has committed.
    """
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


# ── Startup Retry ─────────────────────────────────────────────────────────
async def retry_initialization(
    operation: Callable[[], Awaitable[None]],
    max_attempts: int,
    delay: float,
    retry_on: tuple = (Exception,),
    description: str = "store initialization",
    sleep: Optional[Callable[[float], Awaitable[None]]] = None,
) -> int:
    """
    Run `operation` until it succeeds or `max_attempts` is exhausted.

    What:    Fixed-delay bounded retry for startup work (e.g. CREATE TABLE).
    How:     tenacity AsyncRetrying with stop_after_attempt + wait_fixed;
             each failed attempt is logged via before_sleep_log.

    Args:
        operation:    Zero-argument coroutine function to attempt.
        max_attempts: Total attempts including the first one.
        delay:        Seconds to wait between attempts.
        retry_on:     Exception types that count as a retryable failure;
                      anything else propagates immediately.
        description:  Label used in log lines.
        sleep:        Optional sleep coroutine (tests pass a no-op).

    Returns:
        The attempt number that succeeded.

    Raises:
        InitializationError: every attempt failed.
    """
    retry_kwargs = {}
    if sleep is not None:
        retry_kwargs["sleep"] = sleep

    attempt_number = 0
    try:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(max_attempts),
            wait=wait_fixed(delay),
            retry=retry_if_exception_type(retry_on),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=False,
            **retry_kwargs,
        ):
            with attempt:
                attempt_number = attempt.retry_state.attempt_number
                logger.info("%s: attempt %d/%d", description, attempt_number, max_attempts)
                await operation()
    except RetryError as e:
        last_error = e.last_attempt.exception() if e.last_attempt else None
        logger.error(
            "%s failed after %d attempts: %s",
            description,
            max_attempts,
            last_error,
        )
        raise InitializationError(
            message=f"{description} failed after {max_attempts} attempts",
            attempts=max_attempts,
            context={"last_error": repr(last_error)},
        ) from last_error

    logger.info("%s succeeded on attempt %d", description, attempt_number)
    return attempt_number
