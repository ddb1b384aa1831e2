"""Tests for option scoring."""

from rich_select.scoring import ScoredOrder, default_scorer, score_options


class TestDefaultScorer:
    def test_empty_filter_matches_everything_equally(self):
        assert default_scorer("", "Apple", "Apple", 0) == 0
        assert default_scorer("   ", "Banana", "Banana", 1) == 0

    def test_characters_must_appear_in_order(self):
        assert default_scorer("ap", "Apple", "Apple", 0) is not None
        assert default_scorer("pa", "Apple", "Apple", 0) is None
        assert default_scorer("x", "Apple", "Apple", 0) is None

    def test_matching_is_case_insensitive(self):
        assert default_scorer("APP", "apple", "apple", 0) is not None

    def test_exact_match_scores_at_least_as_high_as_partial(self):
        exact = default_scorer("lemon", "Lemon", "Lemon", 0)
        partial = default_scorer("lemon", "Lemon meringue pie", "Lemon meringue pie", 1)
        assert exact >= partial


class TestScoreOptions:
    def test_sorts_by_score_descending(self):
        options = ["a", "ccc", "bb"]
        scorer = lambda text, value, display, index: len(display)
        assert score_options("", options, options, scorer) == [1, 2, 0]

    def test_ties_keep_index_order(self):
        options = ["x", "y", "z", "w"]
        scorer = lambda text, value, display, index: 5
        assert score_options("q", options, options, scorer) == [0, 1, 2, 3]

    def test_none_excludes_option(self):
        options = ["keep", "drop", "keep too"]
        scorer = lambda text, value, display, index: None if display == "drop" else 1
        assert score_options("", options, options, scorer) == [0, 2]

    def test_scorer_receives_value_display_and_index(self):
        calls = []

        def scorer(text, value, display, index):
            calls.append((text, value, display, index))
            return 0

        score_options("f", [10, 20], ["10", "20"], scorer)
        assert calls == [("f", 10, "10", 0), ("f", 20, "20", 1)]


class TestScoredOrder:
    def test_starts_as_identity(self):
        order = ScoredOrder(["a", "b", "c"], ["a", "b", "c"], default_scorer)
        assert order.indices == [0, 1, 2]
        assert len(order) == 3
        assert list(order) == [0, 1, 2]

    def test_rescore_reports_changes(self):
        texts = ["apple", "banana", "cherry"]
        order = ScoredOrder(texts, texts, default_scorer)

        assert order.rescore("") is False
        assert order.rescore("ch") is True
        assert order.indices == [2]
        assert order.rescore("ch") is False

    def test_get_out_of_range_returns_none(self):
        order = ScoredOrder(["a"], ["a"], default_scorer)
        assert order.get(0) == 0
        assert order.get(1) is None
        assert order.get(-1) is None
