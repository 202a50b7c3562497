"""Tests for commit-message word frequencies."""

from conftest import BASE_TS, make_commit, make_context

from git_chronicle.text import word_frequencies


class TestWordFrequencies:
    def test_counts_and_order(self, three_commit_history):
        words = word_frequencies(make_context(three_commit_history))
        assert words[0].word == "parser"
        assert words[0].count == 3
        assert [w.word for w in words[1:]] == [
            "add",
            "error",
            "handling",
            "import",
            "initial",
            "simplify",
            "tests",
        ]

    def test_stop_words_and_short_words_dropped(self):
        commits = [make_commit("a", BASE_TS, message="Fix it in the UI of the app")]
        words = {w.word for w in word_frequencies(make_context(commits))}
        assert words == {"fix", "app"}

    def test_max_words(self, three_commit_history):
        words = word_frequencies(make_context(three_commit_history, max_words=2))
        assert [w.to_dict() for w in words] == [
            {"word": "parser", "count": 3},
            {"word": "add", "count": 1},
        ]

    def test_custom_stop_words(self, three_commit_history):
        context = make_context(three_commit_history, stop_words=frozenset({"parser"}))
        assert "parser" not in {w.word for w in word_frequencies(context)}
