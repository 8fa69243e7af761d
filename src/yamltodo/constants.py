# -*- coding: utf-8 -*-
"""Application constants."""

APP_NAME = "yaml-todo-manager"
APP_TITLE = "YAML ToDo Manager"
APP_VERSION = "0.1.0"

DEFAULT_SETTINGS_FILE = "settings.json"
DEFAULT_TODO_FILE = "todo_list.yaml"
TODO_LIST_KEY = "todo_list"

STATUS_OPEN = "Open"
STATUS_DONE = "Done"
STATUS_FAILED = "Failed"
KNOWN_STATUSES = (STATUS_OPEN, STATUS_DONE, STATUS_FAILED)

DEFAULT_REASON = "New conversion task"
DONE_INFO = "✅ Conversion verified in Godot"
FAILED_INFO = ""

# Keys every item carries, with the values used when they are absent.
DEFAULT_FIELDS = {
    "status": STATUS_OPEN,
    "reason": DEFAULT_REASON,
    "info": "",
}

STATUS_FILTER_MODES = ("All", "Open", "Done", "Failed", "Custom")

DEFAULT_HOTKEYS = {
    "open": "Ctrl+O",
    "reload": "F5",
    "save": "Ctrl+S",
    "search": "Ctrl+F",
}
