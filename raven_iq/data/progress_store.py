"""
Progress Store for Player Records

This module persists the player's progress record (high score, best IQ, level
completion flags and cumulative question counters) as a single JSON document
and exposes the record-keeping helpers the session orchestrator calls after
each question and each completed level.

Key Features:
- Reads never fail: missing, unreadable or malformed files yield defaults
- Partial saves merged over the current record, stamped with last_played_at
- Record helpers report whether a new record was set
- JSON export/import for backups

Architecture:
- Store file: PROGRESS_STORE_PATH from config, or
  raven_iq/data/progress/rpm-iq-exam-data.json
- JSON serialization using StoredProgress dataclass fields
"""

import json
import logging
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any, Dict, Optional

from ..core.levels import is_valid_level
from ..utils.config_loader import get_config
from .data_structure import StoredProgress, default_level_progress, utc_timestamp

STORE_FILENAME = "rpm-iq-exam-data.json"

_FIELD_NAMES = {f.name for f in fields(StoredProgress)}


def _matches_default_type(value: Any, default: Any) -> bool:
    # bool is an int subclass but never a count or score
    if isinstance(value, bool):
        return isinstance(default, bool)
    return isinstance(value, type(default))


class ProgressStore:
    """
    JSON-file key-value store for the player's progress record.

    Every helper re-reads the file before writing so each call applies exactly
    one update on top of whatever was last persisted.
    """

    def __init__(self, store_path: Optional[str] = None):
        """
        Initialize the store.

        Args:
            store_path: JSON file location. Defaults to PROGRESS_STORE_PATH
                from config, then raven_iq/data/progress/rpm-iq-exam-data.json
        """
        self.logger = logging.getLogger("ProgressStore")
        self.config = get_config()

        if store_path is None:
            store_path = self.config.get_string("PROGRESS_STORE_PATH", "")
        if not store_path:
            store_path = Path(__file__).parent / "progress" / STORE_FILENAME
        self.store_path = Path(store_path)

        self.logger.info(f"ProgressStore initialized with store file: {self.store_path}")

    def load(self) -> StoredProgress:
        """
        Load the progress record, substituting defaults on any failure.

        Returns:
            StoredProgress with stored values merged over defaults
        """
        if not self.store_path.exists():
            return StoredProgress()

        try:
            with open(self.store_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return self._from_dict(data)

        except Exception as e:
            self.logger.error(f"Failed to load progress from {self.store_path}: {e}")
            return StoredProgress()

    def _from_dict(self, data: Dict[str, Any]) -> StoredProgress:
        if not isinstance(data, dict):
            raise ValueError(f"Progress record must be an object, got {type(data).__name__}")

        progress = StoredProgress()
        for name in _FIELD_NAMES - {"level_progress"}:
            if name not in data:
                continue
            value = data[name]
            if _matches_default_type(value, getattr(progress, name)):
                setattr(progress, name, value)
            else:
                self.logger.warning(
                    f"Ignoring stored {name}={value!r}, keeping default"
                )

        level_progress = default_level_progress()
        stored_levels = data.get("level_progress")
        if not isinstance(stored_levels, dict):
            stored_levels = {}
        for key, completed in stored_levels.items():
            try:
                level = int(key)
            except (TypeError, ValueError):
                self.logger.warning(f"Ignoring stored level_progress key {key!r}")
                continue
            if is_valid_level(level):
                level_progress[level] = bool(completed)
        progress.level_progress = level_progress

        return progress

    def save(self, partial: Optional[Dict[str, Any]] = None, **changes) -> bool:
        """
        Merge changes over the current record and write it back.

        Args:
            partial: Field values to update (same as keyword arguments)
            **changes: Field values to update

        Returns:
            True if the record was written, False otherwise
        """
        updates = dict(partial or {})
        updates.update(changes)

        unknown = set(updates) - _FIELD_NAMES
        if unknown:
            self.logger.warning(f"Ignoring unknown progress fields: {sorted(unknown)}")

        progress = self.load()
        for name, value in updates.items():
            if name in _FIELD_NAMES:
                setattr(progress, name, value)
        progress.last_played_at = utc_timestamp()

        try:
            self.store_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.store_path, "w", encoding="utf-8") as f:
                json.dump(asdict(progress), f, indent=2, ensure_ascii=False)

            self.logger.debug(f"Saved progress to {self.store_path}")
            return True

        except Exception as e:
            self.logger.error(f"Failed to save progress to {self.store_path}: {e}")
            return False

    def update_high_score(self, score: int) -> bool:
        """Store score if it beats the high score; True when a new record."""
        if score > self.load().high_score:
            self.save(high_score=score)
            return True
        return False

    def update_best_iq(self, iq: int) -> bool:
        """Store iq if it beats the best IQ; True when a new record."""
        if iq > self.load().best_iq:
            self.save(best_iq=iq)
            return True
        return False

    def mark_level_completed(self, level: int) -> bool:
        """Flag a level as completed; True when it was not completed before."""
        if not is_valid_level(level):
            self.logger.warning(f"Refusing to mark unknown level {level!r} completed")
            return False
        level_progress = dict(self.load().level_progress)
        if level_progress.get(level):
            return False
        level_progress[level] = True
        self.save(level_progress=level_progress)
        return True

    def update_question_stats(self, correct: bool) -> bool:
        """Count one answered question; True when the update was written."""
        current = self.load()
        return self.save(
            total_questions_answered=current.total_questions_answered + 1,
            correct_answers=current.correct_answers + (1 if correct else 0),
        )

    def overall_accuracy(self) -> int:
        """Lifetime accuracy as a whole percentage."""
        progress = self.load()
        if progress.total_questions_answered == 0:
            return 0
        return round(progress.correct_answers / progress.total_questions_answered * 100)

    def is_first_time(self) -> bool:
        return self.load().total_questions_answered == 0

    def level_completion_status(self) -> Dict[int, bool]:
        return self.load().level_progress

    def reset(self) -> bool:
        """
        Delete the stored record.

        Returns:
            True if reset successful, False otherwise
        """
        try:
            self.store_path.unlink(missing_ok=True)
            self.logger.info(f"Reset progress store {self.store_path}")
            return True

        except Exception as e:
            self.logger.error(f"Failed to reset progress store {self.store_path}: {e}")
            return False

    def export_json(self) -> str:
        """Serialize the current record for backup."""
        return json.dumps(asdict(self.load()), indent=2, ensure_ascii=False)

    def import_json(self, json_string: str) -> bool:
        """
        Restore a record exported with export_json.

        Args:
            json_string: Backup document

        Returns:
            True if the backup was valid and saved, False otherwise
        """
        try:
            data = json.loads(json_string)
            if not isinstance(data, dict):
                return False

            scores_valid = all(
                isinstance(data.get(name), int)
                and not isinstance(data.get(name), bool)
                for name in ("high_score", "best_iq")
            )
            if not scores_valid or not isinstance(data.get("level_progress"), dict):
                self.logger.warning("Rejected progress import: missing or invalid fields")
                return False

            restored = self._from_dict(data)
            return self.save(
                {name: getattr(restored, name) for name in _FIELD_NAMES if name in data}
            )

        except Exception as e:
            self.logger.error(f"Failed to import progress: {e}")
            return False
