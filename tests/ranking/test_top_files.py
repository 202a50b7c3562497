"""Tests for top-files rankings."""

import pytest
from conftest import BASE_TS, make_change, make_commit, make_context

from git_chronicle.ranking.top_files import (
    top_files,
    top_files_by_churn,
    top_files_by_complexity,
    top_files_by_size,
)


class TestBySize:
    def test_net_lines(self, three_commit_history):
        top = top_files_by_size(make_context(three_commit_history))
        assert [(s.path, s.value) for s in top] == [
            ("src/app.py", 80),
            ("tests/test_app.py", 30),
            ("README.md", 10),
        ]
        assert top[0].percentage == pytest.approx(80 / 120 * 100)

    def test_non_positive_sizes_dropped(self):
        commits = [
            make_commit("a", BASE_TS, [make_change("a.py", 10), make_change("b.py", 5)]),
            make_commit("b", BASE_TS, [make_change("b.py", 0, 5)]),
        ]
        top = top_files_by_size(make_context(commits))
        assert [s.path for s in top] == ["a.py"]
        assert top[0].percentage == pytest.approx(100.0)

    def test_only_current_files(self, three_commit_history):
        top = top_files_by_size(make_context(three_commit_history, current_files={"README.md"}))
        assert [s.path for s in top] == ["README.md"]

    def test_top_n(self):
        changes = [make_change(f"f{i}.py", i + 1) for i in range(8)]
        top = top_files_by_size(make_context([make_commit("a", BASE_TS, changes)], top_n=3))
        assert [s.path for s in top] == ["f7.py", "f6.py", "f5.py"]


class TestByChurn:
    def test_added_plus_deleted(self, three_commit_history):
        top = top_files_by_churn(make_context(three_commit_history))
        assert [(s.path, s.value) for s in top] == [
            ("src/app.py", 170),
            ("tests/test_app.py", 30),
            ("README.md", 10),
        ]

    def test_ties_broken_by_path(self):
        commits = [make_commit("a", BASE_TS, [make_change("z.py", 3), make_change("a.py", 1, 2)])]
        top = top_files_by_churn(make_context(commits))
        assert [s.path for s in top] == ["a.py", "z.py"]
        assert [s.percentage for s in top] == [50.0, 50.0]


class TestByComplexity:
    def test_no_data(self, three_commit_history):
        context = make_context(three_commit_history)
        assert top_files_by_complexity(context, None) == []
        assert top_files_by_complexity(context, {}) == []

    def test_mapping_filtered_to_current_files(self, three_commit_history):
        context = make_context(three_commit_history)
        top = top_files_by_complexity(context, {"src/app.py": 12, "gone.py": 50, "README.md": 0})
        assert [(s.path, s.value, s.percentage) for s in top] == [("src/app.py", 12, 100.0)]


class TestTopFiles:
    def test_bundle(self, three_commit_history):
        result = top_files(make_context(three_commit_history), {"src/app.py": 4})
        d = result.to_dict()
        assert set(d) == {"largest", "most_churn", "most_complex"}
        assert d["most_complex"][0]["path"] == "src/app.py"

    def test_empty_history(self):
        result = top_files(make_context([]))
        assert result.largest == ()
        assert result.most_churn == ()
        assert result.most_complex == ()
