"""Tests for allocator.py: byte budget and component selection."""

import pytest

from namefit.allocator import ByteBudget, allocate_slug
from namefit.components import SlugComponent


def _tags(*tags):
    return [SlugComponent(".", tag) for tag in tags]


class TestByteBudget:
    def test_take(self):
        budget = ByteBudget(10)
        budget.take(4)
        assert budget.remaining == 6

    def test_underflow_is_an_assertion(self):
        budget = ByteBudget(3)
        with pytest.raises(AssertionError):
            budget.take(4)

    def test_negative_start_rejected(self):
        with pytest.raises(AssertionError):
            ByteBudget(-1)

    def test_take_prefix_respects_codepoints(self):
        budget = ByteBudget(7)
        assert budget.take_prefix("あいう") == "あい"
        assert budget.remaining == 1


class TestLeadingComponent:
    def test_truncated_when_over_budget(self):
        budget = ByteBudget(3)
        assert allocate_slug("abcdef", _tags("x"), set(), budget) == "abc"
        assert budget.remaining == 0

    def test_truncation_on_char_boundary(self):
        budget = ByteBudget(7)
        assert allocate_slug("あいう", [], set(), budget) == "あい"

    def test_exact_fit_drops_other_components(self):
        assert allocate_slug("abc", _tags("x"), set(), ByteBudget(3)) == "abc"


class TestSelection:
    def test_everything_fits(self):
        assert allocate_slug("song", _tags("live", "hq"), set(), ByteBudget(100)) == "song.live.hq"

    def test_shorter_components_preferred(self):
        components = _tags("extended-mix", "v2", "hq")
        result = allocate_slug("song", components, set(), ByteBudget(12))
        # v2 and hq fit, extended-mix is cut to what is left, order preserved
        assert result == "song.e.v2.hq"

    def test_partial_truncation_stops_scan(self):
        components = _tags("abcdef", "ghijklmn")
        result = allocate_slug("s", components, set(), ByteBudget(5))
        assert result == "s.abc"

    def test_partial_tag_on_char_boundary(self):
        result = allocate_slug("a", _tags("あいう"), set(), ByteBudget(6))
        assert result == "a.あ"

    def test_ties_keep_original_order(self):
        components = _tags("bb", "aa", "cc")
        result = allocate_slug("s", components, set(), ByteBudget(7))
        assert result == "s.bb.aa"

    def test_ignored_tag_skipped(self):
        components = _tags("extended-mix", "v2", "hq")
        result = allocate_slug("song", components, {"hq"}, ByteBudget(12))
        assert result == "song.exte.v2"

    def test_ignored_tag_matched_after_normalization(self):
        components = _tags("caf\u00e9", "v2")
        result = allocate_slug("s", components, {"cafe\u0301"}, ByteBudget(100))
        assert result == "s.v2"

    def test_duplicates_collapse_to_first(self):
        components = _tags("live", "hq", "live")
        result = allocate_slug("song", components, set(), ByteBudget(100))
        assert result == "song.live.hq"

    def test_duplicate_after_normalization(self):
        components = _tags("caf\u00e9", "cafe\u0301")
        result = allocate_slug("s", components, set(), ByteBudget(100))
        assert result == "s.caf\u00e9"

    def test_zero_budget_after_first(self):
        result = allocate_slug("song", _tags("a", "b"), set(), ByteBudget(4))
        assert result == "song"

    def test_budget_fully_used(self):
        budget = ByteBudget(12)
        allocate_slug("song", _tags("extended-mix", "v2", "hq"), set(), budget)
        assert budget.remaining == 0
