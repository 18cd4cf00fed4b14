"""Manifest editing workflows.

This module builds temporary manifests, hands them to the user's
editor, and reconciles the edits into rename and removal operations.
"""

from bulkedit.editing.workflow import run_bulk_remove, run_bulk_rename

__all__ = ["run_bulk_remove", "run_bulk_rename"]
