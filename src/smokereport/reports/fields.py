"""Field probes for Playwright JSON report nodes.

Playwright has renamed and moved fields between releases, so every value is
read through a ``FieldProbe``: an ordered list of keys tried in turn, an
acceptance check, and a default. The probes are plain data so the full set
of tolerated spellings is visible in one place.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from ..core.models import TestStatus

# Raw status spellings seen across Playwright versions (compared lower-cased)
STATUS_SYNONYMS: Mapping[str, TestStatus] = {
    "expected": TestStatus.PASSED,
    "pass": TestStatus.PASSED,
    "passed": TestStatus.PASSED,
    "unexpected": TestStatus.FAILED,
    "fail": TestStatus.FAILED,
    "failed": TestStatus.FAILED,
    "skipped": TestStatus.SKIPPED,
}

ERROR_SEPARATOR = " || "
ATTACHMENT_SEPARATOR = " | "


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _is_nonzero_number(value: Any) -> bool:
    return _is_number(value) and value != 0


@dataclass(frozen=True)
class FieldProbe:
    """Ordered lookup of one logical field across alternative keys."""

    name: str
    keys: tuple[str, ...]
    default: Any = None
    accept: Callable[[Any], bool] = _is_text

    def extract(self, node: Any) -> Any:
        """Return the first acceptable value found under ``keys``."""
        if not isinstance(node, Mapping):
            return self.default
        for key in self.keys:
            value = node.get(key)
            if self.accept(value):
                return value
        return self.default


STATUS = FieldProbe("status", ("status", "outcome"))
DURATION = FieldProbe("duration", ("duration", "durationMs"), default=0, accept=_is_nonzero_number)
SUITE_NAME = FieldProbe("suite_name", ("title", "name"), default="")
SPEC_TITLE = FieldProbe("spec_title", ("title",), default="")
ATTACHMENT_ID = FieldProbe("attachment", ("path", "name"), default="")
ERROR_MESSAGE = FieldProbe("error_message", ("message",), default="")


def normalize_status(raw: Any) -> TestStatus:
    """Map a raw status spelling onto the canonical status."""
    if not isinstance(raw, str):
        return TestStatus.UNKNOWN
    return STATUS_SYNONYMS.get(raw.lower(), TestStatus.UNKNOWN)


def extract_status(node: Any) -> TestStatus:
    """Read and normalize the status of a result or run node."""
    return normalize_status(STATUS.extract(node))


def extract_duration(node: Any) -> int | float:
    """Read a duration in milliseconds; a zero ``duration`` defers to ``durationMs``."""
    return DURATION.extract(node)


def _error_entry_text(entry: Any) -> str:
    if entry is None:
        return ""
    if isinstance(entry, Mapping):
        message = ERROR_MESSAGE.extract(entry)
        return message or str(dict(entry))
    return str(entry)


def extract_error_text(node: Any) -> str:
    """Collect error text from ``error`` or, failing that, ``errors``.

    A single ``error.message`` wins; otherwise every ``errors`` entry
    contributes its message (or string form), joined by ``" || "``.
    """
    if not isinstance(node, Mapping):
        return ""

    error = node.get("error")
    if isinstance(error, Mapping):
        message = ERROR_MESSAGE.extract(error)
        if message:
            return message
    elif _is_text(error):
        return error

    errors = node.get("errors")
    if not isinstance(errors, list):
        return ""
    texts = (_error_entry_text(e) for e in errors)
    return ERROR_SEPARATOR.join(t for t in texts if t)


def extract_attachments(node: Any) -> str:
    """Join attachment paths (or names) with ``" | "``."""
    if not isinstance(node, Mapping):
        return ""
    attachments = node.get("attachments")
    if not isinstance(attachments, list):
        return ""
    ids = (ATTACHMENT_ID.extract(a) for a in attachments)
    return ATTACHMENT_SEPARATOR.join(i for i in ids if i)
