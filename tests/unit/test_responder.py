#!/usr/bin/env python3
"""
Unit tests for the Responder facade
"""

import logging
import random
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from responder import FALLBACK_RESPONSE, Responder, ResponderConfig

RESPONSES = """\
hello,hi
Hi there!

bye,goodbye
See you!

crash
Well, it never crashes
on our system.
"""

DEFAULTS = """\
That sounds odd.

Tell me more...
please.

Have you read the manual?
"""


@pytest.fixture
def sources(tmp_path):
    responses = tmp_path / "responses.txt"
    defaults = tmp_path / "default.txt"
    responses.write_text(RESPONSES, encoding="ascii")
    defaults.write_text(DEFAULTS, encoding="ascii")
    return responses, defaults


class TestKeywordLookup:
    """Known words return the stored response."""

    @pytest.fixture
    def responder(self, sources):
        return Responder(*sources, rng=random.Random(0))

    def test_hello(self, responder):
        assert responder.generate_response({"hello"}) == "Hi there!"

    def test_aliases_return_same_value(self, responder):
        assert responder.generate_response({"bye"}) == "See you!"
        assert responder.generate_response({"goodbye"}) == "See you!"

    def test_known_word_among_unknown(self, responder):
        words = {"my", "computer", "crash", "again"}
        assert responder.generate_response(words) == "Well, it never crashes on our system."

    def test_lookup_is_repeatable(self, responder):
        results = {responder.generate_response({"hi", "there"}) for _ in range(20)}
        assert results == {"Hi there!"}

    def test_multiple_matches_return_one_of_them(self, responder):
        result = responder.generate_response({"hello", "bye"})
        assert result in {"Hi there!", "See you!"}

    def test_decision_record(self, responder):
        decision = responder.decide(["unknown", "crash"])
        assert decision.record.layer == "keyword"
        assert decision.record.keyword_hit == "crash"
        assert decision.record.words_checked == 2
        assert decision.record.to_dict()["response"] == decision.response


class TestDefaultFallback:
    """Unknown words pick one of the default responses."""

    @pytest.fixture
    def responder(self, sources):
        return Responder(*sources, rng=random.Random(1234))

    def test_defaults_loaded_in_order(self, responder):
        assert responder.default_responses == (
            "That sounds odd.",
            "Tell me more... please.",
            "Have you read the manual?",
        )

    def test_unknown_words(self, responder):
        for _ in range(50):
            result = responder.generate_response({"xkcd", "qqq"})
            assert result in responder.default_responses

    def test_empty_set(self, responder):
        assert responder.generate_response(set()) in responder.default_responses

    def test_seeded_rng_is_reproducible(self, sources):
        first = Responder(*sources, rng=random.Random(7))
        second = Responder(*sources, rng=random.Random(7))
        picks_a = [first.generate_response(set()) for _ in range(10)]
        picks_b = [second.generate_response(set()) for _ in range(10)]
        assert picks_a == picks_b

    def test_decision_record(self, responder):
        decision = responder.decide(set())
        assert decision.record.layer == "default"
        assert decision.record.keyword_hit is None
        assert responder.default_responses[decision.record.default_index] == decision.response

    def test_debug_logging_emits_decision(self, responder, caplog):
        with caplog.at_level(logging.DEBUG, logger="responder.responder"):
            responder.generate_response({"nothing"})
        assert '"layer": "default"' in caplog.text


class TestNeverFails:
    """Construction and lookup survive missing or malformed sources."""

    def test_both_sources_missing(self, tmp_path):
        responder = Responder(tmp_path / "responses.txt", tmp_path / "default.txt")

        assert responder.response_table == {}
        assert responder.default_responses == (FALLBACK_RESPONSE,)
        assert responder.generate_response({"anything"}) == FALLBACK_RESPONSE

    def test_malformed_defaults(self, sources):
        responses, defaults = sources
        defaults.write_text("A\n\n\nB\n", encoding="ascii")

        responder = Responder(responses, defaults)

        assert responder.default_responses == (FALLBACK_RESPONSE,)
        assert responder.generate_response({"hello"}) == "Hi there!"

    def test_custom_fallback(self, tmp_path):
        responder = Responder(
            tmp_path / "responses.txt",
            tmp_path / "default.txt",
            fallback_response="Say again?",
        )
        assert responder.generate_response({"x"}) == "Say again?"

    def test_accessors_return_copies(self, sources):
        responder = Responder(*sources)
        table = responder.response_table
        table["hello"] = "changed"
        assert responder.generate_response({"hello"}) == "Hi there!"


class TestFromConfig:
    """Building from configuration."""

    def test_from_config(self, sources):
        responses, defaults = sources
        cfg = ResponderConfig(
            responses_path=responses,
            default_responses_path=defaults,
            fallback_response=FALLBACK_RESPONSE,
            random_seed=3,
        )

        first = Responder.from_config(cfg)
        second = Responder.from_config(cfg)

        assert first.generate_response({"bye"}) == "See you!"
        assert [first.generate_response(set()) for _ in range(5)] == [
            second.generate_response(set()) for _ in range(5)
        ]

    def test_shipped_sample_data(self):
        root = Path(__file__).parent.parent.parent
        cfg = ResponderConfig(
            responses_path=root / "data" / "responses.txt",
            default_responses_path=root / "data" / "default.txt",
            fallback_response=FALLBACK_RESPONSE,
            random_seed=None,
        )

        responder = Responder.from_config(cfg)

        assert "crash" in responder.response_table
        assert len(responder.default_responses) > 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
