"""Output formatting for review reports."""

import json
from abc import ABC, abstractmethod
from typing import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from lintscope.models import FileReport, Issue, Severity
from lintscope.report import summary_line


class OutputFormatter(ABC):
  """Base output formatter."""

  @abstractmethod
  def format(self, results: Sequence[FileReport]) -> str:
    """Format file reports for output."""
    ...


def _location(path: str, issue: Issue) -> str:
  return f"{path}:{issue.line}:{issue.column}"


class TerminalFormatter(OutputFormatter):
  """Rich terminal output formatter."""

  SEVERITY_STYLES = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
    Severity.INFO: "blue",
    Severity.HINT: "dim",
  }

  def __init__(self, console: Console | None = None):
    self.console = console or Console()

  def format(self, results: Sequence[FileReport]) -> str:
    for result in results:
      self._print_summary(result)
      self._print_issues(result)
    return ""

  def _print_summary(self, result: FileReport) -> None:
    report = result.report
    self.console.print()
    self.console.print(Panel(
      summary_line(report),
      title=f"[bold]{result.path}[/bold] ({report.language.value}, {report.code_lines} lines)",
      border_style="blue",
    ))

  def _print_issues(self, result: FileReport) -> None:
    if not result.report.issues:
      self.console.print("[green]No issues found.[/green]")
      return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Severity", width=9)
    table.add_column("Line", width=9, justify="right")
    table.add_column("Rule", width=26)
    table.add_column("Category", width=11)
    table.add_column("Issue", min_width=40)

    for issue in result.report.issues:
      style = self.SEVERITY_STYLES.get(issue.severity, "")
      message = Text(issue.message)
      if issue.suggestion:
        message.append(f"\nSuggestion: {issue.suggestion}", style="dim")

      table.add_row(
        Text(issue.severity.value.upper(), style=style),
        f"{issue.line}:{issue.column}",
        issue.rule,
        issue.category.value,
        message,
      )

    self.console.print(table)


class JsonFormatter(OutputFormatter):
  """JSON output formatter."""

  def format(self, results: Sequence[FileReport]) -> str:
    data = [self._report_dict(result) for result in results]
    return json.dumps(data, indent=2)

  def _report_dict(self, result: FileReport) -> dict:
    report = result.report
    return {
      "path": result.path,
      "language": report.language.value,
      "analyzed_at": report.analyzed_at.isoformat(),
      "code_lines": report.code_lines,
      "summary": {
        "errors": report.summary.errors,
        "warnings": report.summary.warnings,
        "infos": report.summary.infos,
        "hints": report.summary.hints,
        "total": report.summary.total,
      },
      "issues": [
        {
          "id": i.id,
          "line": i.line,
          "column": i.column,
          "end_line": i.end_line,
          "end_column": i.end_column,
          "message": i.message,
          "severity": i.severity.value,
          "category": i.category.value,
          "rule": i.rule,
          "suggestion": i.suggestion,
          "fixed_code": i.fixed_code,
        }
        for i in report.issues
      ],
    }


class MarkdownFormatter(OutputFormatter):
  """Markdown output formatter, issues grouped by category."""

  def format(self, results: Sequence[FileReport]) -> str:
    lines = ["# Code Review", ""]

    for result in results:
      report = result.report
      lines.extend([
        f"## {result.path}",
        "",
        f"**Language:** {report.language.value}",
        "",
        summary_line(report),
        "",
      ])

      if not report.issues:
        lines.extend(["No issues found.", ""])
        continue

      for category, issues in report.by_category().items():
        lines.extend([f"### {category.value.capitalize()}", ""])
        for issue in issues:
          severity = issue.severity.value.upper()
          lines.append(
            f"- **[{severity}]** `{_location(result.path, issue)}` "
            f"{issue.message} ({issue.rule})"
          )
          if issue.suggestion:
            lines.append(f"  - Suggestion: {issue.suggestion}")
        lines.append("")

    return "\n".join(lines)


class GitHubFormatter(OutputFormatter):
  """GitHub Actions workflow command formatter for PR annotations."""

  _LEVELS = {
    Severity.ERROR: "error",
    Severity.WARNING: "warning",
    Severity.INFO: "notice",
    Severity.HINT: "notice",
  }

  def format(self, results: Sequence[FileReport]) -> str:
    lines = []
    for result in results:
      for issue in result.report.issues:
        level = self._LEVELS[issue.severity]
        location = f"file={result.path},line={issue.line},col={issue.column}"
        message = f"[{issue.rule}] {issue.message}"
        message = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
        lines.append(f"::{level} {location}::{message}")
    return "\n".join(lines)


def get_formatter(format_type: str) -> OutputFormatter:
  """Get formatter by type name."""
  formatters = {
    "terminal": TerminalFormatter,
    "json": JsonFormatter,
    "markdown": MarkdownFormatter,
    "github": GitHubFormatter,
  }
  formatter_class = formatters.get(format_type)
  if not formatter_class:
    raise ValueError(f"Unknown format: {format_type}")
  return formatter_class()
