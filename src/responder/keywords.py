"""Keyword -> response table built from a plain-text source."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Tuple

logger = logging.getLogger(__name__)

SOURCE_ENCODING = "ascii"


@dataclass(frozen=True)
class ResponseEntry:
    """Keys (at least one) sharing one response body."""
    keys: Tuple[str, ...]
    response: str


def _split_keys(line: str) -> Tuple[str, ...]:
    keys = (key.strip() for key in line.split(","))
    return tuple(key for key in keys if key)


def iter_response_entries(lines: Iterable[str]) -> Iterator[ResponseEntry]:
    """Yield one entry per keys-line and the body lines following it.

    A body runs until the next blank line or the end of the source. Blank
    lines outside a body are skipped. A keys-line with no non-empty key
    still consumes its body but yields nothing.
    """
    keys = None
    body: List[str] = []
    for raw in lines:
        line = raw.strip()
        if keys is None:
            if line:
                keys = _split_keys(line)
            continue
        if line:
            body.append(line)
            continue
        if keys:
            yield ResponseEntry(keys=keys, response=" ".join(body))
        keys = None
        body = []
    if keys:
        yield ResponseEntry(keys=keys, response=" ".join(body))


def _fill_table(table: Dict[str, str], lines: Iterable[str]) -> None:
    for entry in iter_response_entries(lines):
        for key in entry.keys:
            table[key] = entry.response


def build_response_table(lines: Iterable[str]) -> Dict[str, str]:
    table: Dict[str, str] = {}
    _fill_table(table, lines)
    return table


def load_response_table(path: Path) -> Dict[str, str]:
    """Read the response table from ``path``.

    Read failures are logged and whatever was parsed before the failure is
    returned, so a missing file gives an empty table.
    """
    table: Dict[str, str] = {}
    try:
        with Path(path).open("r", encoding=SOURCE_ENCODING) as handle:
            _fill_table(table, handle)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Error reading %s: %s", path, exc)
        return table

    logger.info("Loaded %d response keys from %s", len(table), path)
    return table
