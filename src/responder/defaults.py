"""Default (fallback) responses parsed from blank-line separated paragraphs."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from .keywords import SOURCE_ENCODING

logger = logging.getLogger(__name__)

FALLBACK_RESPONSE = "Could you elaborate on that?"

MAX_BLANK_RUN = 2


@dataclass
class DefaultsParseResult:
    """Outcome of parsing a default-response source.

    ``error`` is set when the source breaks the one-blank-line rule; the
    responses are dropped in that case.
    """
    responses: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DefaultResponseParser:
    """Line-at-a-time parser for the default-response format."""

    def __init__(self) -> None:
        self._responses: List[str] = []
        self._current: List[str] = []
        self._blank_run = 0
        self._line_no = 0
        self._error: Optional[str] = None

    def _close_current(self) -> None:
        if self._current:
            self._responses.append(" ".join(self._current))
            self._current = []

    def feed(self, line: str) -> bool:
        """Consume one line. Returns False once the source is malformed."""
        if self._error is not None:
            return False
        self._line_no += 1
        text = line.strip()
        if not text:
            self._blank_run += 1
            if self._blank_run >= MAX_BLANK_RUN:
                self._error = (
                    f"Two or more consecutive blank lines detected (line {self._line_no})"
                )
                return False
            self._close_current()
            return True

        self._blank_run = 0
        self._current.append(text)
        return True

    def finish(self) -> DefaultsParseResult:
        if self._error is not None:
            return DefaultsParseResult(responses=[], error=self._error)
        self._close_current()
        return DefaultsParseResult(responses=list(self._responses))

    def abort(self) -> DefaultsParseResult:
        """Stop early, keeping only the paragraphs already closed."""
        self._current = []
        return self.finish()


def parse_default_responses(
    lines: Iterable[str], parser: Optional[DefaultResponseParser] = None
) -> DefaultsParseResult:
    if parser is None:
        parser = DefaultResponseParser()
    for line in lines:
        if not parser.feed(line):
            break
    return parser.finish()


def load_default_responses(path: Path, fallback: str = FALLBACK_RESPONSE) -> List[str]:
    """Read default responses from ``path``; never returns an empty list."""
    parser = DefaultResponseParser()
    read_ok = False
    try:
        with Path(path).open("r", encoding=SOURCE_ENCODING) as handle:
            result = parse_default_responses(handle, parser)
        read_ok = True
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Error reading %s: %s", path, exc)
        result = parser.abort()

    responses = result.responses
    if not result.ok:
        logger.error("Error loading default responses: %s", result.error)
        responses = []

    if not responses:
        logger.warning("No default responses available, using %r", fallback)
        return [fallback]

    if read_ok:
        logger.info("Loaded %d default responses from %s", len(responses), path)
    return responses
