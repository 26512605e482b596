"""Pydantic models for the task list.

``Task`` is the stored entity. The remaining models are the request and
response bodies of the HTTP API.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class Task(BaseModel):
    """A single to-do entry.

    Instances are frozen: the store replaces a task with an updated copy
    instead of mutating it, so a task handed out is a read-only snapshot.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(..., description="Unique identifier for the task")
    description: str = Field(..., description="The text shown for the task")
    due_at: datetime = Field(..., description="When the task is due")
    note: str = Field(default="", description="Free-text note attached to the task")
    completed: bool = Field(default=False, description="Whether the task has been completed")


class TaskCreate(BaseModel):
    """Request body for creating a new task."""

    description: str = Field(
        ...,
        min_length=1,
        description="The task text (required, must not be blank)",
    )
    due_at: datetime | None = Field(
        default=None,
        description="Due timestamp; the picker's selected date is used when omitted",
    )


class NoteUpdate(BaseModel):
    """Request body for replacing a task's note."""

    note: str = Field(..., description="New note text, stored verbatim; empty clears it")


class PickerSelect(BaseModel):
    """Request body for changing the selected due date."""

    selected: datetime = Field(..., description="The timestamp new tasks will be due at")


class PickerState(BaseModel):
    """The date picker as seen by the presentation layer."""

    selected: datetime
    upcoming: list[datetime]


class HealthResponse(BaseModel):
    """Response from the health check endpoint."""

    status: str = "healthy"
    version: str = "1.0.0"
