"""Tests for per-file complexity scoring and summaries."""

import pytest

from git_chronicle.complexity.patterns import GENERIC_PATTERNS, PYTHON_PATTERNS, patterns_for
from git_chronicle.complexity.scorer import (
    ComplexitySummary,
    FileAnalysisResult,
    analyze_file,
    complexity_map,
    is_binary,
    score_complexity,
    stub_result,
    summarize,
)


def make_result(path, complexity, lines=10):
    return FileAnalysisResult(
        path=path,
        language="Python",
        complexity=complexity,
        lines=lines,
        size_bytes=lines * 20,
        is_binary=complexity == 0,
    )


class TestIsBinary:
    def test_plain_text(self):
        assert not is_binary("def f():\n\treturn 1\r\n")

    def test_nul_byte(self):
        assert is_binary("abc\0def")

    def test_empty(self):
        assert not is_binary("")

    def test_threshold_has_floor_of_100(self):
        """Short files need more than 100 control characters."""
        assert not is_binary("\x01" * 100)
        assert is_binary("\x01" * 101)

    def test_threshold_scales_with_length(self):
        content = "a" * 1000 + "\x01" * 500  # 500 > 0.3 * 1500
        assert is_binary(content)
        content = "a" * 1000 + "\x01" * 300  # 300 < 0.3 * 1300
        assert not is_binary(content)


class TestScoreComplexity:
    def test_empty_is_one(self):
        assert score_complexity("", "Python") == 1

    def test_python_decisions(self):
        code = "if a and b:\n    pass\nelif c or d:\n    pass\n"
        assert score_complexity(code, "Python") == 5

    def test_elif_not_counted_as_if(self):
        assert score_complexity("elif x:", "Python") == 2

    def test_javascript_operators(self):
        code = "if (a && b) { x = y ? 1 : 2; }"
        assert score_complexity(code, "JavaScript") == 4

    def test_c_family_switch(self):
        code = "switch (x) { case 1: if (y || z) {} }"
        assert score_complexity(code, "Java") == 5

    def test_go_has_no_ternary(self):
        assert score_complexity("x ? y : z", "Go") == 1

    def test_words_inside_identifiers_ignored(self):
        assert score_complexity("verify = format_for_display", "Python") == 1

    def test_unknown_language_uses_generic(self):
        assert patterns_for("Ruby") is GENERIC_PATTERNS
        assert patterns_for("Python") is PYTHON_PATTERNS
        assert score_complexity("if x\n  y\nend", "Ruby") == 2


class TestAnalyzeFile:
    def test_python_file(self):
        result = analyze_file("src/a.py", "x = 1\nif x:\n    y = 2\n")
        assert result.language == "Python"
        assert result.complexity == 2
        assert result.lines == 4
        assert result.size_bytes == len("x = 1\nif x:\n    y = 2\n")
        assert not result.is_binary

    def test_unsupported_language_has_zero_complexity(self):
        result = analyze_file("README.md", "if you read this\n")
        assert result.complexity == 0
        assert result.lines == 2

    def test_binary_content(self):
        result = analyze_file("src/a.py", "\0\0\0")
        assert result.is_binary
        assert result.complexity == 0
        assert result.lines == 0
        assert result.size_bytes == 3

    def test_size_counts_utf8_bytes(self):
        result = analyze_file("notes.txt", "héllo")
        assert result.size_bytes == 6

    def test_stub_result(self):
        stub = stub_result("lib/x.go")
        assert stub.is_binary
        assert stub.complexity == 0
        assert stub.lines == 0
        assert stub.language == "Go"
        assert stub.fetch_failed

    @pytest.mark.parametrize(
        "content, expected",
        [("", 1), ("a", 1), ("a\nb\n", 3), ("a\r\nb", 2), ("a\rb\x0bc\u2028d", 1)],
    )
    def test_line_count_splits_on_newline_only(self, content, expected):
        assert analyze_file("notes.txt", content).lines == expected

    def test_scored_file_is_not_a_fetch_failure(self):
        assert not analyze_file("src/a.py", "x = 1\n").fetch_failed


class TestSummarize:
    def test_empty(self):
        assert summarize([]) == ComplexitySummary()

    def test_only_unscored_files(self):
        summary = summarize([make_result("a.png", 0)])
        assert summary.average_complexity == 0.0
        assert summary.max_complexity == 0
        assert summary.hotspots == ()

    def test_average_excludes_zero(self):
        results = [make_result("a.py", 3), make_result("b.py", 5), make_result("c.py", 5), make_result("d.png", 0)]
        summary = summarize(results)
        assert summary.average_complexity == pytest.approx(4.33)
        assert summary.max_complexity == 5

    def test_average_rounds_half_up(self):
        results = [make_result(f"f{i}.py", 2) for i in range(7)] + [make_result("g.py", 3)]
        assert summarize(results).average_complexity == 2.13

    def test_average_rounds_down_below_half(self):
        results = [make_result("a.py", 1), make_result("b.py", 1), make_result("c.py", 2)]
        assert summarize(results).average_complexity == 1.33

    def test_hotspots_sorted_with_path_tiebreak(self):
        results = [make_result("z.py", 5), make_result("a.py", 3), make_result("m.py", 5)]
        summary = summarize(results)
        assert [h.path for h in summary.hotspots] == ["m.py", "z.py", "a.py"]

    def test_hotspot_limit(self):
        results = [make_result(f"f{i:02d}.py", i + 1) for i in range(15)]
        summary = summarize(results, hotspot_limit=10)
        assert len(summary.hotspots) == 10
        assert summary.hotspots[0].complexity == 15

    def test_to_dict(self):
        summary = summarize([make_result("a.py", 4, lines=12)])
        assert summary.to_dict() == {
            "average_complexity": 4.0,
            "max_complexity": 4,
            "hotspots": [{"path": "a.py", "complexity": 4, "lines": 12}],
        }


class TestComplexityMap:
    def test_skips_unscored(self):
        results = [make_result("a.py", 3), make_result("b.png", 0)]
        assert complexity_map(results) == {"a.py": 3}
