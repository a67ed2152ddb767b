# To Do List — Dark GUI (CustomTkinter)
# -----------------------------------------------------------
# Features:
#   • Dark GUI built with CustomTkinter (purple accent theme)
#   • Persistent CSV storage in tasks.csv (working directory)
#   • Category bar: ALL plus one button per category, filters the list
#   • Click a task to edit it, click ✔ to mark it complete (removes it)
#   • "Add Task" popup with category picker and description
#
# Usage:
#   pip install customtkinter
#   python todolist_app.py

import json
import logging
import os
import sys

import tkinter as tk

import customtkinter as ctk

from todolist import DATA_FILE, Task, TaskCategory, TaskHandler

logger = logging.getLogger(__name__)

# -------------------------------
# CONFIG
# -------------------------------
APP_TITLE = "To Do List"
WINDOW_GEOMETRY = "600x800"
DATA_DIR = os.path.dirname(os.path.abspath(DATA_FILE))
THEME_FILE = os.path.join(DATA_DIR, "todolist_purple_theme.json")
LOG_FILE = os.path.join(DATA_DIR, "todolist.log")

CATEGORY_COLORS = {
    TaskCategory.WORK: ("#2563EB", "#1D4ED8"),
    TaskCategory.PERSONAL: ("#DB2777", "#BE185D"),
    TaskCategory.SCHOOL: ("#D97706", "#B45309"),
    TaskCategory.ERRAND: ("#059669", "#047857"),
    TaskCategory.HEALTH: ("#DC2626", "#B91C1C"),
    TaskCategory.OTHER: ("#64748B", "#475569"),
}

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# -------------------------------
# Helpers
# -------------------------------
def setup_logging(log_file: str = LOG_FILE, console_level: int = logging.INFO):
    """Send INFO+ to stderr and everything to ``log_file``. Call once at start-up."""
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    root.addHandler(ch)

    try:
        fh = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as exc:
        logger.warning("Log file %s unavailable: %s", log_file, exc)
    else:
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)


PURPLE_THEME_OVERRIDES = {
    "CTk": {
        "fg_color": ["#1F1F1F", "#1F1F1F"],
        "top_fg_color": ["#1A1A1A", "#1A1A1A"],
        "text_color": ["#111111", "#F1F1F1"],
        "text_color_disabled": ["#8A8A8A", "#6D6D6D"],
    },
    "CTkToplevel": {
        "fg_color": ["#1F1F1F", "#1F1F1F"],
    },
    "CTkButton": {
        "corner_radius": 10,
        "border_width": 0,
        "fg_color": ["#8B5CF6", "#6D28D9"],
        "hover_color": ["#7C3AED", "#5B21B6"],
        "border_color": ["#3F3F46", "#3F3F46"],
        "text_color": ["#FFFFFF", "#FFFFFF"],
        "text_color_disabled": ["#8A8A8A", "#6D6D6D"],
    },
    "CTkFrame": {
        "corner_radius": 16,
        "border_width": 0,
        "fg_color": ["#262626", "#262626"],
        "top_fg_color": ["#1F1F1F", "#1F1F1F"],
        "border_color": ["#3F3F46", "#3F3F46"],
    },
    "CTkEntry": {
        "corner_radius": 8,
        "border_width": 0,
        "fg_color": ["#2C2C2C", "#2C2C2C"],
        "border_color": ["#3F3F46", "#3F3F46"],
        "text_color": ["#E5E7EB", "#E5E7EB"],
        "placeholder_text_color": ["#9CA3AF", "#9CA3AF"],
    },
    "CTkOptionMenu": {
        "corner_radius": 8,
        "fg_color": ["#3B3B3B", "#3B3B3B"],
        "button_color": ["#8B5CF6", "#6D28D9"],
        "button_hover_color": ["#7C3AED", "#5B21B6"],
        "text_color": ["#E5E7EB", "#E5E7EB"],
        "text_color_disabled": ["#8A8A8A", "#6D6D6D"],
    },
    "CTkLabel": {
        "corner_radius": 0,
        "fg_color": "transparent",
        "text_color": ["#E5E7EB", "#E5E7EB"],
    },
}


def write_purple_theme_if_missing() -> bool:
    """Write a CustomTkinter theme JSON: the bundled dark-blue theme with a purple accent.

    Returns True when THEME_FILE is available afterwards.
    """
    if os.path.exists(THEME_FILE):
        return True
    base_path = os.path.join(os.path.dirname(ctk.__file__), "assets", "themes", "dark-blue.json")
    try:
        with open(base_path, "r", encoding="utf-8") as f:
            theme = json.load(f)
    except (OSError, ValueError) as exc:
        # Widgets look up every key, so a partial theme is worse than none.
        logger.warning("Bundled theme %s unreadable: %s", base_path, exc)
        return False
    for widget, values in PURPLE_THEME_OVERRIDES.items():
        theme.setdefault(widget, {}).update(values)
    try:
        with open(THEME_FILE, "w", encoding="utf-8") as f:
            json.dump(theme, f, indent=2)
    except OSError as exc:
        logger.warning("Could not write theme file %s: %s", THEME_FILE, exc)
        return False
    return True


# -------------------------------
# GUI Components
# -------------------------------
class TaskRow(ctk.CTkFrame):
    def __init__(self, master, task: Task, *, on_click, on_complete):
        super().__init__(master, fg_color="#0F172A", corner_radius=12)
        self.task = task

        stripe_color = CATEGORY_COLORS.get(task.category, ("#312E81", "#312E81"))[0]
        ctk.CTkFrame(self, width=6, fg_color=stripe_color, corner_radius=3).pack(
            side="left", fill="y", padx=(8, 0), pady=8
        )

        self.task_button = ctk.CTkButton(
            self,
            text=task.description or "(no description)",
            anchor="w",
            fg_color="transparent",
            hover_color="#1E1B4B",
            command=lambda: on_click(task),
        )
        self.task_button.pack(side="left", fill="x", expand=True, padx=8, pady=8)

        self.done_button = ctk.CTkButton(
            self,
            text="✔",
            width=40,
            fg_color="#22C55E",
            hover_color="#16A34A",
            text_color="#0B1120",
            command=lambda: on_complete(task),
        )
        self.done_button.pack(side="right", padx=8, pady=8)


class TaskDialog(ctk.CTkToplevel):
    """Modal popup used for both adding and editing a task."""

    def __init__(self, master, *, title: str, action_text: str, task: Task | None = None):
        super().__init__(master)
        self.title(title)
        self.geometry("320x240")
        self.resizable(False, False)
        self.transient(master)
        self.result: tuple[TaskCategory, str] | None = None

        ctk.CTkLabel(self, text="Category:").pack(anchor="w", padx=16, pady=(16, 0))
        self.category_menu = ctk.CTkOptionMenu(self, values=[c.name for c in TaskCategory])
        self.category_menu.pack(fill="x", padx=16, pady=(4, 8))
        self.category_menu.set(task.category.name if task else TaskCategory.UNCATEGORIZED.name)

        ctk.CTkLabel(self, text="Description:").pack(anchor="w", padx=16)
        self.description_entry = ctk.CTkEntry(self, placeholder_text="Task description")
        self.description_entry.pack(fill="x", padx=16, pady=(4, 4))
        if task and task.description:
            self.description_entry.insert(0, task.description)

        self.error_label = ctk.CTkLabel(self, text="", text_color="#F87171")
        self.error_label.pack()

        btns = ctk.CTkFrame(self, fg_color="transparent")
        btns.pack(pady=(4, 12))
        ctk.CTkButton(btns, text="Cancel", width=90, command=self._cancel).pack(side="right", padx=6)
        ctk.CTkButton(btns, text=action_text, width=90, command=self._apply).pack(side="right", padx=6)

        self.bind("<Return>", lambda _event: self._apply())
        self.bind("<Escape>", lambda _event: self._cancel())
        self.protocol("WM_DELETE_WINDOW", self._cancel)

        # grab_set fails until the window is viewable on some platforms
        self.after(50, self._grab)
        self.description_entry.focus_set()

    def _grab(self):
        try:
            self.grab_set()
        except tk.TclError:
            pass

    def _apply(self):
        description = (self.description_entry.get() or "").strip()
        if not description:
            self.error_label.configure(text="Description cannot be empty.")
            return
        self.result = (TaskCategory[self.category_menu.get()], description)
        self.destroy()

    def _cancel(self):
        self.result = None
        self.destroy()

    def show(self) -> tuple[TaskCategory, str] | None:
        self.wait_window()
        return self.result


class ToDoApp(ctk.CTk):
    """Main window: category filter bar, task list and Add Task button."""

    def __init__(self, handler: TaskHandler):
        super().__init__()
        self.handler = handler
        self.selected_category: TaskCategory | None = None  # None = ALL
        self.title(APP_TITLE)
        self.geometry(WINDOW_GEOMETRY)
        self.minsize(420, 480)

        header = ctk.CTkFrame(self)
        header.pack(fill="x", padx=16, pady=(16, 8))
        ctk.CTkLabel(header, text=APP_TITLE, font=("Segoe UI", 20, "bold")).pack(side="left", padx=8, pady=8)
        self.status_label = ctk.CTkLabel(header, text="")
        self.status_label.pack(side="right", padx=8)

        self._build_category_bar()

        self.task_list = ctk.CTkScrollableFrame(self)
        self.task_list.pack(fill="both", expand=True, padx=16, pady=8)

        footer = ctk.CTkFrame(self, fg_color="transparent")
        footer.pack(fill="x", padx=16, pady=(0, 16))
        ctk.CTkButton(footer, text="Add Task", command=self._open_add_dialog).pack(side="right")

        self.refresh_task_list()

    # ----------------------- UI Builders -----------------------
    def _build_category_bar(self):
        bar = ctk.CTkScrollableFrame(self, orientation="horizontal", height=48)
        bar.pack(fill="x", padx=16, pady=(0, 8))
        self.category_buttons: dict[TaskCategory | None, ctk.CTkButton] = {}

        all_button = ctk.CTkButton(bar, text="ALL", width=70, command=lambda: self._select_category(None))
        all_button.pack(side="left", padx=4)
        self.category_buttons[None] = all_button

        for category in TaskCategory:
            kwargs = {}
            # UNCATEGORIZED keeps the theme colour
            if category in CATEGORY_COLORS:
                fg, hover = CATEGORY_COLORS[category]
                kwargs = {"fg_color": fg, "hover_color": hover}
            button = ctk.CTkButton(
                bar,
                text=category.name,
                width=90,
                border_color="#F9FAFB",
                command=lambda c=category: self._select_category(c),
                **kwargs,
            )
            button.pack(side="left", padx=4)
            self.category_buttons[category] = button

        self._highlight_selected_category()

    def _highlight_selected_category(self):
        for category, button in self.category_buttons.items():
            button.configure(border_width=2 if category == self.selected_category else 0)

    # ----------------------- Actions -----------------------
    def _select_category(self, category: TaskCategory | None):
        self.selected_category = category
        self._highlight_selected_category()
        self.refresh_task_list()

    def refresh_task_list(self):
        for child in self.task_list.winfo_children():
            child.destroy()

        if self.selected_category is None:
            tasks = self.handler.get_all_tasks()
        else:
            tasks = self.handler.get_tasks_by_category(self.selected_category)

        for task in tasks:
            row = TaskRow(
                self.task_list,
                task,
                on_click=self._open_edit_dialog,
                on_complete=self._complete_task,
            )
            row.pack(fill="x", pady=4)

        if not tasks:
            ctk.CTkLabel(self.task_list, text="No tasks here yet.", text_color="#9CA3AF").pack(pady=24)

        label = "ALL" if self.selected_category is None else self.selected_category.name
        self.status_label.configure(text=f"{label}: {len(tasks)} task(s)")

    def _open_add_dialog(self):
        result = TaskDialog(self, title="Add Task", action_text="Add").show()
        if result is None:
            return
        category, description = result
        self.handler.add_task(category, description)
        self.refresh_task_list()

    def _open_edit_dialog(self, task: Task):
        current = self.handler.get_task(task.id)
        if current is None:
            self.refresh_task_list()
            return
        result = TaskDialog(self, title="Edit Task", action_text="Save", task=current).show()
        if result is None:
            return
        category, description = result
        self.handler.update_task(current.id, category, description)
        self.refresh_task_list()

    def _complete_task(self, task: Task):
        self.handler.remove_task(task.id)
        self.refresh_task_list()


# -------------------------------
# MAIN
# -------------------------------
def main():
    setup_logging()

    # Apply dark mode and theme
    ctk.set_appearance_mode("dark")
    theme = THEME_FILE if write_purple_theme_if_missing() else "dark-blue"
    try:
        ctk.set_default_color_theme(theme)
    except Exception:
        # Fallback to built-in if custom theme fails
        logger.warning("Theme %s could not be applied; using dark-blue", theme)
        ctk.set_default_color_theme("dark-blue")

    handler = TaskHandler(DATA_FILE)
    app = ToDoApp(handler)
    app.mainloop()


if __name__ == "__main__":
    main()
