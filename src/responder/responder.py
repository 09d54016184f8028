"""
Responder — keyword lookup with random default fallback

Input is a set of words (already tokenized by the caller):

  Any word is a known key → the stored response for that key
  No word matches         → a uniformly random default response

Both sources are parsed once at construction. Missing or malformed
sources never fail construction; the responder degrades to the canned
fallback response instead.
"""

import json
import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple

from .config import ResponderConfig
from .defaults import FALLBACK_RESPONSE, load_default_responses
from .keywords import load_response_table
from .observability import DecisionLogRecord

logger = logging.getLogger(__name__)


@dataclass
class ResponseDecision:
    response: str
    record: DecisionLogRecord


class Responder:
    """
    Generates a response from a set of input words.

    The first word (in the order the set yields them) found in the response
    table wins. When several words are keys the result follows set iteration
    order; it is deliberately not normalised.
    """

    def __init__(
        self,
        responses_path: Path,
        default_responses_path: Path,
        fallback_response: str = FALLBACK_RESPONSE,
        rng: Optional[random.Random] = None,
    ):
        self._table: Dict[str, str] = load_response_table(responses_path)
        self._defaults = load_default_responses(default_responses_path, fallback_response)
        self._rng = rng if rng is not None else random.Random()

    @classmethod
    def from_config(cls, config: ResponderConfig) -> "Responder":
        return cls(
            config.responses_path,
            config.default_responses_path,
            fallback_response=config.fallback_response,
            rng=random.Random(config.random_seed),
        )

    @property
    def response_table(self) -> Dict[str, str]:
        return dict(self._table)

    @property
    def default_responses(self) -> Tuple[str, ...]:
        return tuple(self._defaults)

    def decide(self, words: Iterable[str]) -> ResponseDecision:
        """Pick a response and describe how it was picked."""
        words_checked = 0
        for word in words:
            words_checked += 1
            response = self._table.get(word)
            if response is not None:
                record = DecisionLogRecord(
                    layer="keyword",
                    keyword_hit=word,
                    default_index=None,
                    words_checked=words_checked,
                    response=response,
                )
                return ResponseDecision(response=response, record=record)

        index = self._rng.randrange(len(self._defaults))
        response = self._defaults[index]
        record = DecisionLogRecord(
            layer="default",
            keyword_hit=None,
            default_index=index,
            words_checked=words_checked,
            response=response,
        )
        return ResponseDecision(response=response, record=record)

    def generate_response(self, words: Iterable[str]) -> str:
        """
        Main entry point. Takes a set of words, returns a response.
        Never throws for a non-null input, including the empty set.
        """
        decision = self.decide(words)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("decision %s", json.dumps(decision.record.to_dict()))
        return decision.response
