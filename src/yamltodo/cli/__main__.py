# -*- coding: utf-8 -*-
"""CLI module entry point for `python -m yamltodo.cli`."""

from __future__ import annotations

from yamltodo.cli.todo_cli import app


if __name__ == "__main__":
    app()
