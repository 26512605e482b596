"""In-memory task storage.

Tasks live in exactly one of two ordered partitions: ``active`` (insertion
order) or ``completed`` (completion order). Failed operations report a
``StoreResult`` instead of raising and leave the store untouched.
"""

import functools
import threading
from collections.abc import Callable
from datetime import datetime
from enum import Enum
from typing import ParamSpec, TypeVar
from uuid import UUID, uuid4

from tasklist.models import Task

P = ParamSpec("P")
R = TypeVar("R")


class StoreResult(str, Enum):
    """Outcome of a store mutation."""

    OK = "ok"
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    IMMUTABLE = "immutable"


class TaskStore:
    """Simple in-memory task storage."""

    def __init__(self) -> None:
        """Initialize an empty task store."""
        self._active: list[Task] = []
        self._completed: list[Task] = []

    def __len__(self) -> int:
        return len(self._active) + len(self._completed)

    def __contains__(self, task_id: object) -> bool:
        return self.get(task_id) is not None  # type: ignore[arg-type]

    def list_active(self) -> list[Task]:
        """Return active tasks in insertion order."""
        return list(self._active)

    def list_completed(self) -> list[Task]:
        """Return completed tasks in completion order."""
        return list(self._completed)

    def get(self, task_id: UUID) -> Task | None:
        """Get a task from either partition, or None if not found."""
        for task in self._active + self._completed:
            if task.id == task_id:
                return task
        return None

    def create(self, description: str, due_at: datetime) -> UUID | None:
        """Append a new active task and return its id.

        Returns None without creating anything when the description is
        empty or whitespace only.
        """
        if not description.strip():
            return None
        task = Task(id=uuid4(), description=description, due_at=due_at)
        self._active.append(task)
        return task.id

    def toggle_complete(self, task_id: UUID) -> StoreResult:
        """Move an active task to the end of the completed list."""
        index = self._active_index(task_id)
        if index is None:
            return StoreResult.NOT_FOUND
        task = self._active.pop(index)
        self._completed.append(task.model_copy(update={"completed": True}))
        return StoreResult.OK

    def set_note(self, task_id: UUID, text: str) -> StoreResult:
        """Replace the note of an active task verbatim.

        Notes of completed tasks are frozen.
        """
        index = self._active_index(task_id)
        if index is None:
            if any(task.id == task_id for task in self._completed):
                return StoreResult.IMMUTABLE
            return StoreResult.NOT_FOUND
        self._active[index] = self._active[index].model_copy(update={"note": text})
        return StoreResult.OK

    def delete_active(self, task_id: UUID) -> StoreResult:
        """Discard an active task by id."""
        index = self._active_index(task_id)
        if index is None:
            return StoreResult.NOT_FOUND
        del self._active[index]
        return StoreResult.OK

    def delete_active_at(self, position: int) -> StoreResult:
        """Discard the active task at a zero-based position."""
        if not 0 <= position < len(self._active):
            return StoreResult.NOT_FOUND
        del self._active[position]
        return StoreResult.OK

    def clear_completed(self) -> None:
        """Drop every completed task."""
        self._completed.clear()

    def reset(self) -> None:
        """Clear both partitions. Useful for testing."""
        self._active.clear()
        self._completed.clear()

    def _active_index(self, task_id: UUID) -> int | None:
        for index, task in enumerate(self._active):
            if task.id == task_id:
                return index
        return None


def _locked(method: Callable[P, R]) -> Callable[P, R]:
    @functools.wraps(method)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        with args[0]._lock:  # type: ignore[attr-defined]
            return method(*args, **kwargs)

    return wrapper


class SynchronizedTaskStore(TaskStore):
    """TaskStore whose operations each run under a single lock.

    For hosts that call the store from more than one thread.
    """

    def __init__(self) -> None:
        super().__init__()
        self._lock = threading.Lock()

    __len__ = _locked(TaskStore.__len__)
    list_active = _locked(TaskStore.list_active)
    list_completed = _locked(TaskStore.list_completed)
    get = _locked(TaskStore.get)
    create = _locked(TaskStore.create)
    toggle_complete = _locked(TaskStore.toggle_complete)
    set_note = _locked(TaskStore.set_note)
    delete_active = _locked(TaskStore.delete_active)
    delete_active_at = _locked(TaskStore.delete_active_at)
    clear_completed = _locked(TaskStore.clear_completed)
    reset = _locked(TaskStore.reset)


# Global store instance
store = TaskStore()
