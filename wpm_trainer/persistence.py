from __future__ import annotations

import json
import logging
from pathlib import Path

from .results import CompletedTestRecord
from .settings import DEFAULT_HISTORY_LIMIT, default_history_path

log = logging.getLogger("wpm_trainer.persistence")


class HistoryStore:
    """Most-recent-first list of finished tests, kept in a JSON file.

    Persistence is best-effort: unreadable files load as an empty history and
    failed writes are logged, never raised.
    """

    def __init__(self, path: Path, *, limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        if limit < 1:
            raise ValueError("limit must be >= 1")
        self._path = path
        self._limit = int(limit)
        self._records: list[CompletedTestRecord] = self.load()

    @classmethod
    def default(cls, *, limit: int = DEFAULT_HISTORY_LIMIT) -> HistoryStore:
        return cls(default_history_path(), limit=limit)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[CompletedTestRecord]:
        try:
            if not self._path.exists():
                return []
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            log.warning("Could not read history from %s: %s", self._path, e)
            return []
        if not isinstance(payload, list):
            log.warning("Ignoring history in %s: expected a list", self._path)
            return []

        loaded: list[CompletedTestRecord] = []
        for item in payload:
            try:
                loaded.append(CompletedTestRecord.from_dict(item))
            except ValueError as e:
                log.warning("Skipping malformed history record: %s", e)
        return loaded[: self._limit]

    def save(self, records: list[CompletedTestRecord]) -> bool:
        self._records = list(records)[: self._limit]
        payload = [record.to_dict() for record in self._records]
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self._path.with_suffix(f"{self._path.suffix}.tmp")
            tmp_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
            tmp_path.replace(self._path)
        except OSError as e:
            log.warning("Could not write history to %s: %s", self._path, e)
            return False
        return True

    def records(self) -> list[CompletedTestRecord]:
        return list(self._records)

    def prepend(self, record: CompletedTestRecord) -> bool:
        return self.save([record, *self._records])

    def remove(self, index: int) -> bool:
        if not (0 <= index < len(self._records)):
            return False
        remaining = list(self._records)
        del remaining[index]
        return self.save(remaining)

    def clear(self) -> bool:
        return self.save([])
