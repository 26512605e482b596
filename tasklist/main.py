"""FastAPI application entry point."""

from datetime import datetime
from typing import NoReturn
from uuid import UUID

import structlog
from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware

from tasklist.config import load_settings
from tasklist.logging_config import setup_logging
from tasklist.models import (
    HealthResponse,
    NoteUpdate,
    PickerSelect,
    PickerState,
    Task,
    TaskCreate,
)
from tasklist.picker import picker, upcoming_dates
from tasklist.store import StoreResult, store

settings = load_settings()
setup_logging(settings)

log = structlog.get_logger()

app = FastAPI(
    title="Task List API",
    description="A personal task list with active and completed views.",
    version="1.0.0",
)

# Configure CORS for frontend access
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_ERRORS: dict[StoreResult, tuple[int, str]] = {
    StoreResult.INVALID_INPUT: (
        status.HTTP_422_UNPROCESSABLE_CONTENT,
        "Task description must not be empty",
    ),
    StoreResult.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Task not found"),
    StoreResult.IMMUTABLE: (
        status.HTTP_409_CONFLICT,
        "Notes of completed tasks cannot be changed",
    ),
}


def _fail(result: StoreResult, event: str, **fields: object) -> NoReturn:
    """Raise the HTTP error matching a failed store result."""
    log.warning(event, result=result.value, **fields)
    status_code, detail = _ERRORS[result]
    raise HTTPException(status_code=status_code, detail=detail)


def _check(result: StoreResult, event: str, **fields: object) -> None:
    if result is not StoreResult.OK:
        _fail(result, event, **fields)


def _get_or_404(task_id: UUID) -> Task:
    task = store.get(task_id)
    if task is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found",
        )
    return task


@app.get("/api/health", response_model=HealthResponse, tags=["System"])
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse()


@app.get("/api/tasks/active", response_model=list[Task], tags=["Tasks"])
async def list_active() -> list[Task]:
    """List active tasks in the order they were added."""
    return store.list_active()


@app.get("/api/tasks/completed", response_model=list[Task], tags=["Tasks"])
async def list_completed() -> list[Task]:
    """List completed tasks in the order they were completed."""
    return store.list_completed()


@app.delete(
    "/api/tasks/completed",
    status_code=status.HTTP_204_NO_CONTENT,
    tags=["Tasks"],
)
async def clear_completed() -> None:
    """Delete every completed task."""
    cleared = len(store.list_completed())
    store.clear_completed()
    log.info("completed_cleared", count=cleared)


@app.delete(
    "/api/tasks/active/{position}",
    status_code=status.HTTP_204_NO_CONTENT,
    tags=["Tasks"],
)
async def delete_active_at(position: int) -> None:
    """Delete the active task at a zero-based position."""
    _check(store.delete_active_at(position), "task_delete_rejected", position=position)
    log.info("task_deleted", position=position)


@app.post(
    "/api/tasks",
    response_model=Task,
    status_code=status.HTTP_201_CREATED,
    tags=["Tasks"],
)
async def create_task(data: TaskCreate) -> Task:
    """Create a new task, due at the picker's selection unless given."""
    due_at = data.due_at if data.due_at is not None else picker.selected
    task_id = store.create(data.description, due_at)
    if task_id is None:
        _fail(StoreResult.INVALID_INPUT, "task_create_rejected")
    log.info("task_created", task_id=str(task_id), due_at=due_at.isoformat())
    return _get_or_404(task_id)


@app.get("/api/tasks/{task_id}", response_model=Task, tags=["Tasks"])
async def get_task(task_id: UUID) -> Task:
    """Get a specific task by ID."""
    return _get_or_404(task_id)


@app.post("/api/tasks/{task_id}/complete", response_model=Task, tags=["Tasks"])
async def complete_task(task_id: UUID) -> Task:
    """Mark an active task as completed."""
    _check(store.toggle_complete(task_id), "task_complete_rejected", task_id=str(task_id))
    log.info("task_completed", task_id=str(task_id))
    return _get_or_404(task_id)


@app.put("/api/tasks/{task_id}/note", response_model=Task, tags=["Tasks"])
async def update_note(task_id: UUID, data: NoteUpdate) -> Task:
    """Replace the note of an active task."""
    _check(store.set_note(task_id, data.note), "task_note_rejected", task_id=str(task_id))
    log.info("task_note_updated", task_id=str(task_id))
    return _get_or_404(task_id)


@app.delete(
    "/api/tasks/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    tags=["Tasks"],
)
async def delete_task(task_id: UUID) -> None:
    """Delete an active task."""
    _check(store.delete_active(task_id), "task_delete_rejected", task_id=str(task_id))
    log.info("task_deleted", task_id=str(task_id))


def _picker_state() -> PickerState:
    return PickerState(
        selected=picker.selected,
        upcoming=upcoming_dates(datetime.now(), settings.upcoming_days),
    )


@app.get("/api/picker", response_model=PickerState, tags=["Picker"])
async def get_picker() -> PickerState:
    """Get the selected due date and the upcoming dates to choose from."""
    return _picker_state()


@app.put("/api/picker", response_model=PickerState, tags=["Picker"])
async def select_due_date(data: PickerSelect) -> PickerState:
    """Change the due date given to new tasks."""
    picker.select(data.selected)
    log.info("due_date_selected", selected=data.selected.isoformat())
    return _picker_state()
