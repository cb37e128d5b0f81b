"""Parsing and validation of URL batches handed to the analyzer."""
from __future__ import annotations

from pathlib import Path
from typing import Any

from .core.models import PageTarget
from .utils import is_valid_url

INVALID_FORMAT_MESSAGE = "Invalid input format. Expected an object with a 'urls' array."
INVALID_TYPES_MESSAGE = "Invalid data types. Both URL and brand name should be strings."


class InputError(ValueError):
    """Raised when a batch of targets is malformed."""


def parse_targets_tsv(text: str) -> list[PageTarget]:
    """Parse newline-delimited ``url<TAB>brand`` records.

    Blank lines are ignored; the first record is the template.
    """
    targets: list[PageTarget] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        if "\t" not in line:
            raise InputError(f"Line {line_number}: expected 'url<TAB>brand name'")
        # Columns after the brand name are ignored
        fields = line.split("\t")
        url, brand_name = fields[0].strip(), fields[1]
        if not is_valid_url(url):
            raise InputError(f"Line {line_number}: Invalid URL: {url}")
        targets.append(PageTarget(url=url, brand_name=brand_name.strip()))
    if not targets:
        raise InputError("No URLs supplied")
    return targets


def load_targets_file(path: str | Path) -> list[PageTarget]:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise InputError(f"Unable to read URL list {path}: {exc}") from exc
    return parse_targets_tsv(text)


def parse_targets_payload(payload: Any) -> list[PageTarget]:
    """Validate a ``{"urls": [[url, brand], ...]}`` payload."""
    if not isinstance(payload, dict) or not isinstance(payload.get("urls"), list):
        raise InputError(INVALID_FORMAT_MESSAGE)

    targets: list[PageTarget] = []
    for entry in payload["urls"]:
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise InputError("Each entry in 'urls' must be a [url, brandName] pair.")
        url, brand_name = entry
        if not isinstance(url, str) or not isinstance(brand_name, str):
            raise InputError(INVALID_TYPES_MESSAGE)
        if not is_valid_url(url):
            raise InputError(f"Invalid URL: {url}")
        targets.append(PageTarget(url=url, brand_name=brand_name))
    if not targets:
        raise InputError("The 'urls' array must contain at least one pair.")
    return targets


__all__ = [
    "InputError",
    "parse_targets_tsv",
    "load_targets_file",
    "parse_targets_payload",
]
