# To Do List — task model, CSV storage and task handler
# -----------------------------------------------------------
# Core of the desktop To Do List (the window lives in todolist_app.py):
#   • Task records with an immutable id, a category and a description
#   • Persistent CSV storage, one task per line: id,CATEGORY,description
#   • TaskHandler keeps tasks in memory, hands out sequential ids and
#     rewrites the whole file after every change
#   • Tasks are always returned newest first (highest id first)
#
# Notes:
#   • Descriptions are written raw; the reader splits on the first two
#     commas only, so commas inside a description survive a reload.
#   • Storage errors are logged and swallowed so the UI keeps running.

import logging
import os
from enum import Enum

logger = logging.getLogger(__name__)

# -------------------------------
# CONFIG
# -------------------------------
DATA_FILE = "tasks.csv"
CSV_FIELD_COUNT = 3


# -------------------------------
# Model
# -------------------------------
class TaskCategory(Enum):
    WORK = "WORK"
    PERSONAL = "PERSONAL"
    SCHOOL = "SCHOOL"
    ERRAND = "ERRAND"
    HEALTH = "HEALTH"
    OTHER = "OTHER"
    UNCATEGORIZED = "UNCATEGORIZED"

    @classmethod
    def parse(cls, value: "TaskCategory | str | None") -> "TaskCategory":
        """Return the category for ``value``; blank or ``None`` means UNCATEGORIZED."""
        if value is None:
            return cls.UNCATEGORIZED
        if isinstance(value, cls):
            return value
        name = str(value).strip().upper()
        if not name:
            return cls.UNCATEGORIZED
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Unknown task category: {value!r}") from None


class Task:
    __slots__ = ("_id", "category", "description")

    def __init__(self, task_id: int, category: TaskCategory | str | None = None, description: str = ""):
        self._id = int(task_id)
        self.category = TaskCategory.parse(category)
        self.description = description

    @property
    def id(self) -> int:
        return self._id

    def to_csv(self) -> str:
        # One task per line, so line breaks inside the description are folded.
        description = " ".join((self.description or "").splitlines())
        return f"{self._id},{self.category.value},{description}"

    @classmethod
    def from_csv(cls, line: str) -> "Task":
        fields = line.rstrip("\r\n").split(",", CSV_FIELD_COUNT - 1)
        if len(fields) != CSV_FIELD_COUNT:
            raise ValueError(f"Expected {CSV_FIELD_COUNT} fields, got {len(fields)}: {line!r}")
        raw_id, raw_category, description = fields
        try:
            task_id = int(raw_id.strip())
        except ValueError:
            raise ValueError(f"Invalid task id: {raw_id!r}") from None
        return cls(task_id, TaskCategory.parse(raw_category), description)

    def __eq__(self, other):
        if not isinstance(other, Task):
            return NotImplemented
        return (self._id, self.category, self.description) == (other._id, other.category, other.description)

    def __hash__(self):
        return hash(self._id)

    def __repr__(self):
        return f"Task(id={self._id}, category={self.category.name}, description={self.description!r})"


def newest_first(tasks) -> list[Task]:
    return sorted(tasks, key=lambda t: t.id, reverse=True)


# -------------------------------
# Storage
# -------------------------------
class CsvHandler:
    """Reads and writes the task list as a flat CSV file.

    Business rules (id generation, ordering, filtering) belong to
    ``TaskHandler``; this class only moves tasks between memory and disk.
    """

    def __init__(self, file_path):
        self.file_path = os.fspath(file_path)
        self._ensure_file()

    def _ensure_file(self):
        if os.path.exists(self.file_path):
            return
        try:
            parent = os.path.dirname(self.file_path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(self.file_path, "a", encoding="utf-8"):
                pass
            logger.info("New CSV file created: %s", self.file_path)
        except OSError as exc:
            logger.error("Error creating CSV file %s: %s", self.file_path, exc)

    def load_tasks(self) -> list[Task]:
        tasks: list[Task] = []
        try:
            # Undecodable bytes load as U+FFFD rather than failing the whole file.
            with open(self.file_path, "r", encoding="utf-8", errors="replace") as f:
                for lineno, line in enumerate(f, start=1):
                    if not line.strip():
                        continue
                    try:
                        tasks.append(Task.from_csv(line))
                    except ValueError as exc:
                        logger.warning("Skipping malformed line %d in %s: %s", lineno, self.file_path, exc)
        except OSError as exc:
            logger.error("Error fetching tasks from %s: %s", self.file_path, exc)
            return []
        logger.debug("Loaded %d task(s) from %s", len(tasks), self.file_path)
        return tasks

    def save_tasks(self, tasks):
        try:
            with open(self.file_path, "w", encoding="utf-8", newline="") as f:
                for task in tasks:
                    f.write(task.to_csv() + "\n")
        except OSError as exc:
            logger.error("Error saving tasks to %s: %s", self.file_path, exc)
            return
        logger.debug("Saved %d task(s) to %s", len(tasks), self.file_path)

    def append_task(self, task: Task):
        try:
            with open(self.file_path, "a", encoding="utf-8", newline="") as f:
                f.write(task.to_csv() + "\n")
        except OSError as exc:
            logger.error("Error adding task to %s: %s", self.file_path, exc)

    def remove_task(self, task_id: int):
        tasks = [t for t in self.load_tasks() if t.id != task_id]
        self.save_tasks(tasks)


# -------------------------------
# Task handling
# -------------------------------
class TaskHandler:
    """In-memory task list backed by a CSV file.

    Every mutation rewrites the full file. Ids come from ``next_id``, which
    starts one past the highest id found on disk, so ids freed by deletions
    are never reused while the handler is alive.
    """

    def __init__(self, file_path=DATA_FILE):
        self.storage = CsvHandler(file_path)
        self.tasks: list[Task] = newest_first(self.storage.load_tasks())
        self.next_id = max((t.id for t in self.tasks), default=0) + 1
        logger.info("TaskHandler ready file=%s total=%d next_id=%d", file_path, len(self.tasks), self.next_id)

    def _sort_newest_first(self):
        self.tasks.sort(key=lambda t: t.id, reverse=True)

    def add_task(self, category: TaskCategory | str | None, description: str) -> Task:
        task = Task(self.next_id, category or TaskCategory.UNCATEGORIZED, description)
        self.next_id += 1
        self.tasks.append(task)
        self._sort_newest_first()
        self.storage.save_tasks(self.tasks)
        logger.debug("Task added id=%s category=%s", task.id, task.category.name)
        return task

    def remove_task(self, task_id: int) -> bool:
        remaining = [t for t in self.tasks if t.id != task_id]
        if len(remaining) == len(self.tasks):
            return False
        self.tasks[:] = remaining
        self.storage.save_tasks(self.tasks)
        logger.debug("Task removed id=%s", task_id)
        return True

    def update_task(
        self,
        task_id: int,
        category: TaskCategory | str | None = None,
        description: str | None = None,
    ) -> bool:
        task = self.get_task(task_id)
        if task is None:
            return False
        if category is not None:
            task.category = TaskCategory.parse(category)
        if description is not None:
            task.description = description
        self.storage.save_tasks(self.tasks)
        logger.debug("Task updated id=%s", task_id)
        return True

    def get_task(self, task_id: int) -> Task | None:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def get_all_tasks(self) -> list[Task]:
        self._sort_newest_first()
        return list(self.tasks)

    def get_tasks_by_category(self, category: TaskCategory | str) -> list[Task]:
        category = TaskCategory.parse(category)
        return newest_first(t for t in self.tasks if t.category == category)
