"""Request / response schemas for the gateway API."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field, StrictInt

from orgchart.models import Employee

# --- Health ---


def _utc_now() -> datetime:
    return datetime.now(UTC)


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    timestamp: datetime = Field(default_factory=_utc_now)


# --- Org chart operations ---


class MoveRequest(BaseModel):
    employeeID: StrictInt
    supervisorID: StrictInt


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


class OrgResponse(BaseModel):
    ceo: Employee
    size: int
    undo_depth: int = 0
    redo_depth: int = 0
