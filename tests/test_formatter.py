"""Tests for output formatters."""

import io
import json

import pytest
from lintscope.models import FileReport
from lintscope.output import (
  GitHubFormatter,
  JsonFormatter,
  MarkdownFormatter,
  TerminalFormatter,
  get_formatter,
)
from rich.console import Console


class TestJsonFormatter:
  def test_format(self, sample_file_report: FileReport) -> None:
    data = json.loads(JsonFormatter().format([sample_file_report]))

    assert len(data) == 1
    entry = data[0]
    assert entry["path"] == "src/app.js"
    assert entry["language"] == "javascript"
    assert entry["code_lines"] == 3
    assert entry["analyzed_at"] == "2024-05-01T12:00:00+00:00"
    assert entry["summary"] == {"errors": 1, "warnings": 1, "infos": 1, "hints": 0, "total": 3}

    first = entry["issues"][0]
    assert first["rule"] == "no-eval"
    assert first["severity"] == "error"
    assert first["category"] == "security"
    assert first["suggestion"] == "eval is a security risk; avoid it"

  def test_empty(self, empty_file_report: FileReport) -> None:
    data = json.loads(JsonFormatter().format([empty_file_report]))

    assert data[0]["issues"] == []
    assert data[0]["summary"]["total"] == 0


class TestMarkdownFormatter:
  def test_groups_by_category(self, sample_file_report: FileReport) -> None:
    output = MarkdownFormatter().format([sample_file_report])

    assert output.startswith("# Code Review")
    assert "## src/app.js" in output
    assert "### Security" in output
    assert "### Style" in output
    assert "- **[ERROR]** `src/app.js:1:1` Found eval() call (no-eval)" in output
    assert "  - Suggestion: eval is a security risk; avoid it" in output

  def test_no_issues(self, empty_file_report: FileReport) -> None:
    output = MarkdownFormatter().format([empty_file_report])

    assert "No issues found." in output
    assert "###" not in output


class TestGitHubFormatter:
  def test_annotations(self, sample_file_report: FileReport) -> None:
    lines = GitHubFormatter().format([sample_file_report]).splitlines()

    assert lines == [
      "::error file=src/app.js,line=1,col=1::[no-eval] Found eval() call",
      "::warning file=src/app.js,line=2,col=5::[no-var] Variable declared with var",
      "::notice file=src/app.js,line=3,col=1::[no-magic-numbers] Magic number 3600",
    ]

  def test_empty(self, empty_file_report: FileReport) -> None:
    assert GitHubFormatter().format([empty_file_report]) == ""


class TestTerminalFormatter:
  def test_prints_table(self, sample_file_report: FileReport) -> None:
    buffer = io.StringIO()
    formatter = TerminalFormatter(Console(file=buffer, width=160))

    assert formatter.format([sample_file_report]) == ""

    output = buffer.getvalue()
    assert "src/app.js" in output
    assert "no-eval" in output
    assert "Found 3 issues" in output

  def test_no_issues(self, empty_file_report: FileReport) -> None:
    buffer = io.StringIO()
    TerminalFormatter(Console(file=buffer, width=120)).format([empty_file_report])

    assert "No issues found." in buffer.getvalue()


class TestGetFormatter:
  @pytest.mark.parametrize("name,cls", [
    ("terminal", TerminalFormatter),
    ("json", JsonFormatter),
    ("markdown", MarkdownFormatter),
    ("github", GitHubFormatter),
  ])
  def test_known(self, name: str, cls: type) -> None:
    assert isinstance(get_formatter(name), cls)

  def test_unknown(self) -> None:
    with pytest.raises(ValueError, match="Unknown format"):
      get_formatter("xml")
