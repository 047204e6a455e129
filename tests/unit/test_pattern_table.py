import threading

import pytest

from modelconfig import limits
from modelconfig.limits import all_entries, lookup_first_match, matching_patterns, pattern_table


def test_table_entries_are_lowercase_and_positive():
    entries = all_entries()

    assert entries
    for pattern, limit in entries:
        assert pattern
        assert pattern == pattern.lower()
        assert limit > 0


def test_lookup_matches_substring_anywhere_in_name():
    assert lookup_first_match("claude-3-opus") == 200_000
    assert lookup_first_match("anthropic/claude-3-5-sonnet-latest") == 200_000
    assert lookup_first_match("gpt-4-turbo") == 128_000
    assert lookup_first_match("gemini-2.5-pro") == 1_000_000
    assert lookup_first_match("gemma2-9b-it") == 8_192


def test_lookup_is_case_sensitive_and_misses_unknown_models():
    assert lookup_first_match("unknown-model") is None
    assert lookup_first_match("") is None
    assert lookup_first_match("CLAUDE-3-OPUS") is None


def test_ambiguous_name_resolves_to_first_declared_pattern():
    patterns = matching_patterns("grok-4-0709")
    assert patterns == ["grok", "grok-4"]

    table = pattern_table()
    assert lookup_first_match("grok-4-0709") == table[patterns[0]]


def test_all_entries_is_fresh_copy():
    first = all_entries()
    first.clear()

    assert all_entries()


def test_table_is_read_only():
    table = pattern_table()
    with pytest.raises(TypeError):
        table["new-model"] = 1  # type: ignore[index]
    assert "new-model" not in pattern_table()


def test_concurrent_first_access_builds_table_once(monkeypatch):
    calls = []
    original_build = limits._build_table

    def counting_build():
        calls.append(1)
        return original_build()

    monkeypatch.setattr(limits, "_table", None)
    monkeypatch.setattr(limits, "_build_table", counting_build)

    barrier = threading.Barrier(8)
    seen = []

    def worker():
        barrier.wait()
        seen.append(pattern_table())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(calls) == 1
    assert len(seen) == 8
    assert all(table is seen[0] for table in seen)
