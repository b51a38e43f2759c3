"""
Response bodies for /health and /health/ready.
"""

from datetime import datetime
from typing import Dict, Literal, Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness: the process is up and serving requests."""
    status: Literal["ok"] = "ok"
    version: str = Field(description="Running employee-directory-api version")
    timestamp: datetime


class DatabaseCheck(BaseModel):
    """Outcome of the ``SELECT 1`` probe against the employee store."""
    backend: str = Field(description="SQLAlchemy backend name, e.g. sqlite or postgresql")
    healthy: bool
    latency_ms: float
    error: Optional[str] = Field(
        default=None,
        description="Set only when the probe failed",
    )


class ReadinessResponse(BaseModel):
    """Readiness: ``ready`` only when every check in ``checks`` is healthy."""
    status: Literal["ready", "not_ready"]
    checks: Dict[str, DatabaseCheck]
    timestamp: datetime
