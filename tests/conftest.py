"""Pytest fixtures."""

from datetime import datetime, timezone

import pytest
from lintscope.models import (
  Category,
  FileReport,
  Issue,
  Language,
  Report,
  Severity,
  issue_id,
)
from lintscope.report import build_report


def make_issue(
  line: int,
  column: int,
  message: str = "Something",
  severity: Severity = Severity.WARNING,
  category: Category = Category.STYLE,
  rule: str = "test-rule",
  suggestion: str | None = None,
) -> Issue:
  return Issue(
    id=issue_id(rule, line, column),
    line=line,
    column=column,
    message=message,
    severity=severity,
    category=category,
    rule=rule,
    suggestion=suggestion,
  )


@pytest.fixture
def analyzed_at() -> datetime:
  return datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_report(analyzed_at: datetime) -> Report:
  issues = [
    make_issue(1, 1, "Found eval() call", Severity.ERROR, Category.SECURITY, "no-eval",
               suggestion="eval is a security risk; avoid it"),
    make_issue(2, 5, "Variable declared with var", Severity.WARNING, Category.STYLE, "no-var"),
    make_issue(3, 1, "Magic number 3600", Severity.INFO, Category.STYLE, "no-magic-numbers"),
  ]
  return build_report(
    issues, [], Language.JAVASCRIPT, "eval(x)\nvar a = 1;\nreturn 3600;",
    analyzed_at=analyzed_at,
  )


@pytest.fixture
def sample_file_report(sample_report: Report) -> FileReport:
  return FileReport(path="src/app.js", report=sample_report)


@pytest.fixture
def empty_file_report(analyzed_at: datetime) -> FileReport:
  report = build_report([], [], Language.PYTHON, "", analyzed_at=analyzed_at)
  return FileReport(path="clean.py", report=report)


@pytest.fixture
def go_snippet() -> str:
  return """package main

import (
\t"fmt"
\t"os"
)

func main() {
\tfmt.Println("hi")
\tpanic("boom")
}
"""


@pytest.fixture
def python_snippet() -> str:
  return """def load(path):
    try:
        return open(path).read()
    except:
        return None
"""
