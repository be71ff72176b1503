"""Full-screen editor application."""

from termpix.cli.studio.editor import EditorApp, run_editor

__all__ = ["EditorApp", "run_editor"]
