"""
Readiness probe for the employee database.

``check_database`` never raises: an unreachable or slow database is
reported as ``False`` and logged.
"""

import asyncio
import logging
from typing import Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from employee_api.core import database

logger = logging.getLogger(__name__)


async def _select_one(engine: AsyncEngine) -> None:
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


async def check_database(
    engine: Optional[AsyncEngine] = None,
    timeout_seconds: float = 2.0,
) -> bool:
    """
    Run ``SELECT 1`` against the employee database.

    Args:
        engine: Engine to probe (defaults to the application engine)
        timeout_seconds: Give up and report unhealthy after this long
    """
    engine = engine or database.engine
    try:
        async with asyncio.timeout(timeout_seconds):
            await _select_one(engine)
    except TimeoutError:
        logger.warning(
            "Database probe timed out",
            extra={"timeout_seconds": timeout_seconds, "backend": engine.url.get_backend_name()},
        )
        return False
    except (SQLAlchemyError, OSError) as e:
        logger.warning(
            "Database probe failed",
            extra={
                "error": str(e),
                "error_type": type(e).__name__,
                "backend": engine.url.get_backend_name(),
            },
        )
        return False

    return True
