"""Tests for the exception hierarchy."""

from pathlib import Path

from git_chronicle.exceptions import (
    AnalysisCancelledError,
    AnalysisError,
    ChronicleError,
    ContentError,
    ContentNotFoundError,
    GitCommandError,
    HistoryError,
    InvalidConfigError,
    InvalidPathError,
    InvalidRecordError,
)


class TestHierarchy:
    def test_everything_is_a_chronicle_error(self):
        errors = [
            InvalidRecordError("CommitRecord", "sha", "", "empty"),
            ContentNotFoundError("HEAD", "a.py"),
            AnalysisCancelledError(1, 3),
            GitCommandError(["git", "log"], "boom"),
            InvalidPathError(Path("/x"), "missing"),
            InvalidConfigError("top_n", 0, "too small"),
        ]
        assert all(isinstance(e, ChronicleError) for e in errors)

    def test_content_errors_are_analysis_errors(self):
        err = ContentNotFoundError("HEAD", "a.py")
        assert isinstance(err, ContentError)
        assert isinstance(err, AnalysisError)

    def test_git_error_is_history_error(self):
        assert isinstance(GitCommandError(["git"], "x"), HistoryError)


class TestMessages:
    def test_details_in_str(self):
        err = ContentNotFoundError("HEAD", "a.py")
        assert str(err) == "File not found at HEAD: a.py (revision=HEAD, path=a.py, reason=path not in revision)"

    def test_git_command(self):
        err = GitCommandError(["git", "log", "--numstat"], "not a git repository")
        assert err.message == "git command failed: git log --numstat"
        assert err.details == {"reason": "not a git repository"}

    def test_cancelled_carries_partial_results(self):
        err = AnalysisCancelledError(2, 5, ["r1", "r2"])
        assert err.completed == 2
        assert err.total == 5
        assert err.partial_results == ["r1", "r2"]
        assert AnalysisCancelledError(0, 5).partial_results == []

    def test_invalid_path_names_the_repository(self):
        err = InvalidPathError(Path("/srv/repo"), "not a git repository")
        assert str(err) == "Cannot read git history from /srv/repo: not a git repository (path=/srv/repo)"
        assert err.reason == "not a git repository"

    def test_invalid_config_names_the_setting(self):
        err = InvalidConfigError("top_n", 0, "top_n must be at least 1")
        assert err.message == "Invalid value for setting 'top_n': top_n must be at least 1"
        assert err.details == {"key": "top_n", "value": "0"}

    def test_detail_values_are_stringified(self):
        err = AnalysisCancelledError(2, 5)
        assert err.details == {"completed": "2", "total": "5"}
