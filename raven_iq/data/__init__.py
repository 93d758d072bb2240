"""
Progress persistence for Raven-IQ.

This module provides the stored progress record and the JSON-file store the
session orchestrator reads and updates between sessions.
"""

from .data_structure import StoredProgress
from .progress_store import ProgressStore

__all__ = ["StoredProgress", "ProgressStore"]
