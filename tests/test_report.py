"""Tests for report assembly."""

import json

from conftest import BASE_TS, make_context

from git_chronicle.complexity.scorer import analyze_file
from git_chronicle.config import ChronicleConfig
from git_chronicle.report import REPORT_VERSION, build_report, load_context


class StubHistory:
    def __init__(self, commits):
        self.commits = commits
        self.max_commits = "unset"

    def get_commits(self, max_commits=None):
        self.max_commits = max_commits
        return self.commits


class StubFileSet:
    def __init__(self, files):
        self.files = frozenset(files)

    def get_current_files(self):
        return self.files


class StubComplexityTool:
    def __init__(self, available, scores):
        self.available = available
        self.scores = scores

    def is_available(self):
        return self.available

    def analyze(self):
        return self.scores


class TestLoadContext:
    def test_fetches_once_and_freezes(self, three_commit_history):
        history = StubHistory(three_commit_history)
        context = load_context(history, StubFileSet(["src/app.py"]), now=BASE_TS)
        assert len(context.commits) == 3
        assert context.current_files == frozenset({"src/app.py"})
        assert context.now == BASE_TS
        assert history.max_commits is None

    def test_max_commits_passed(self, three_commit_history):
        history = StubHistory(three_commit_history)
        load_context(history, StubFileSet([]), config=ChronicleConfig(max_commits=2))
        assert history.max_commits == 2


class TestBuildReport:
    def test_payload_is_json_serializable(self, three_commit_history):
        payload = build_report(make_context(three_commit_history))
        decoded = json.loads(json.dumps(payload))
        assert decoded["version"] == REPORT_VERSION
        assert set(decoded) == {
            "version",
            "generated_at",
            "summary",
            "time_series",
            "linear_series",
            "file_heat",
            "top_files",
            "awards",
            "contributors",
            "file_types",
            "complexity",
            "words",
        }

    def test_summary(self, three_commit_history):
        summary = build_report(make_context(three_commit_history))["summary"]
        assert summary == {
            "total_commits": 3,
            "total_contributors": 2,
            "current_files": 3,
            "lines_added": 165,
            "lines_deleted": 45,
            "cumulative_lines": 120,
            "cumulative_bytes": 6000,
        }

    def test_series_agree(self, three_commit_history):
        payload = build_report(make_context(three_commit_history))
        assert (
            payload["time_series"][-1]["cumulative_lines"]
            == payload["linear_series"][-1]["cumulative_lines"]
        )

    def test_empty_history(self):
        payload = build_report(make_context([]))
        assert payload["summary"]["total_commits"] == 0
        assert payload["time_series"] == []
        assert payload["complexity"]["hotspots"] == []

    def test_builtin_complexity(self, three_commit_history):
        results = [analyze_file("src/app.py", "if a:\n    pass\n"), analyze_file("README.md", "# hi\n")]
        payload = build_report(make_context(three_commit_history), complexity_results=results)
        assert payload["complexity"]["max_complexity"] == 2
        assert [e["path"] for e in payload["top_files"]["most_complex"]] == ["src/app.py"]

    def test_external_tool_preferred(self, three_commit_history):
        results = [analyze_file("src/app.py", "if a:\n    pass\n")]
        tool = StubComplexityTool(True, {"src/app.py": 9})
        payload = build_report(
            make_context(three_commit_history), complexity_results=results, external_complexity=tool
        )
        assert payload["top_files"]["most_complex"][0]["value"] == 9

    def test_unavailable_tool_falls_back(self, three_commit_history):
        results = [analyze_file("src/app.py", "if a:\n    pass\n")]
        tool = StubComplexityTool(False, {"src/app.py": 9})
        payload = build_report(
            make_context(three_commit_history), complexity_results=results, external_complexity=tool
        )
        assert payload["top_files"]["most_complex"][0]["value"] == 2

    def test_no_complexity_data(self, three_commit_history):
        payload = build_report(make_context(three_commit_history))
        assert payload["top_files"]["most_complex"] == []
