"""Baseline persistence.

A :class:`BaselineStore` is a typed get/set over a single named record.
Malformed stored data degrades to "no baseline" so the next cycle simply
takes a fresh one.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Protocol

from pydantic import ValidationError

from pyparkir._constants import BASELINE_KEY
from pyparkir.models.baseline import DailyBaseline

_logger = logging.getLogger(__name__)


class BaselineStore(Protocol):
    """Structural interface for baseline persistence."""

    def load(self) -> DailyBaseline | None:
        ...

    def save(self, baseline: DailyBaseline) -> None:
        ...


class MemoryBaselineStore:
    """In-process store; the baseline is lost on exit."""

    def __init__(self, baseline: DailyBaseline | None = None) -> None:
        self._baseline = baseline

    def load(self) -> DailyBaseline | None:
        return self._baseline

    def save(self, baseline: DailyBaseline) -> None:
        self._baseline = baseline


class JsonFileBaselineStore:
    """Key-value JSON file store.

    The file holds a JSON object; the baseline lives under *key* and any
    other keys are left untouched on save.  Writes go to a temporary file
    in the same directory which then replaces the original, so a crash
    mid-write never leaves a truncated file behind.
    """

    def __init__(self, path: str | os.PathLike[str], key: str = BASELINE_KEY) -> None:
        self._path = Path(path)
        self._key = key

    @property
    def path(self) -> Path:
        return self._path

    def _read_document(self) -> dict[str, Any] | None:
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            _logger.warning("Cannot read baseline file %s: %s", self._path, exc)
            return None
        try:
            document = json.loads(text)
        except json.JSONDecodeError:
            _logger.warning("Baseline file %s is not JSON, ignoring it", self._path)
            return None
        if not isinstance(document, dict):
            _logger.warning("Baseline file %s does not hold a JSON object, ignoring it", self._path)
            return None
        return document

    def load(self) -> DailyBaseline | None:
        document = self._read_document()
        if document is None:
            return None
        record = document.get(self._key)
        if record is None:
            return None
        # Records written by a browser were stored as a JSON string.
        if isinstance(record, str):
            try:
                record = json.loads(record)
            except json.JSONDecodeError:
                _logger.warning("Baseline record %r is not JSON, treating as absent", self._key)
                return None
        try:
            return DailyBaseline.from_record(record)
        except ValidationError as exc:
            _logger.warning(
                "Baseline record %r is invalid (%d error(s)), treating as absent",
                self._key,
                exc.error_count(),
            )
            return None

    def save(self, baseline: DailyBaseline) -> None:
        document = self._read_document() or {}
        document[self._key] = baseline.to_record()

        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(document, handle, indent=2, sort_keys=True)
            os.replace(tmp_name, self._path)
        except BaseException:
            with contextlib.suppress(FileNotFoundError):
                os.unlink(tmp_name)
            raise
        _logger.debug("Saved baseline %s to %s", document[self._key], self._path)
