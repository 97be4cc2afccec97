from __future__ import annotations

import importlib


def test_ui_modules_importable() -> None:
    for module in ("habit_tracker.ui.login", "habit_tracker.ui.habits", "habit_tracker.ui.common"):
        assert importlib.import_module(module) is not None


def test_app_entrypoint_importable() -> None:
    import app

    assert callable(app.main)
