"""Bounded, newest-first analysis history persisted as a JSON array."""
import json
import logging
import pathlib
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

HISTORY_KEY = "equity-analysis-history"
DEFAULT_LIMIT = 50


class AnalysisHistory:
    def __init__(self, path: Optional[pathlib.Path] = None, limit: int = DEFAULT_LIMIT):
        self.path = pathlib.Path(path) if path else None
        self.limit = limit
        self.entries: List[Dict[str, Any]] = []

    @classmethod
    def load(cls, path: pathlib.Path, limit: int = DEFAULT_LIMIT) -> "AnalysisHistory":
        history = cls(path, limit)
        if not history.path.exists():
            return history
        try:
            saved = json.loads(history.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable history file %s: %s", history.path, exc)
            return history
        if not isinstance(saved, list):
            logger.warning("Ignoring history file %s: expected a JSON array", history.path)
            return history
        history.entries = [e for e in saved if isinstance(e, dict)][:limit]
        return history

    def add(self, result: Dict[str, Any]) -> None:
        self.entries = [result, *self.entries[: self.limit - 1]]
        self.save()

    def get(self, entry_id: int) -> Optional[Dict[str, Any]]:
        return next((e for e in self.entries if e.get("id") == entry_id), None)

    def clear(self) -> None:
        self.entries = []
        self.save()

    def save(self) -> None:
        if self.path is None:
            return
        self.path.write_text(json.dumps(self.entries), encoding="utf-8")

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)
