"""Issue aggregation and report construction."""

from datetime import datetime, timezone
from typing import Iterable, Sequence

from lintscope.models import Issue, Language, Report, Severity, Summary


def build_report(
  scanner_issues: Sequence[Issue],
  naming_issues: Sequence[Issue],
  language: Language,
  source_text: str,
  analyzed_at: datetime | None = None,
) -> Report:
  """Merge raw findings into a Report.

  Issues are concatenated, stable-sorted by (line, column) and deduplicated
  on (line, column, message), keeping the first occurrence.

  Args:
    scanner_issues: Issues from the lint scanner.
    naming_issues: Issues from the naming analyzer.
    language: Language the text was analyzed as.
    source_text: The analyzed text, used to count lines.
    analyzed_at: Timestamp to record; defaults to now (UTC).

  Returns:
    An immutable Report.
  """
  merged = sorted(
    [*scanner_issues, *naming_issues],
    key=lambda issue: (issue.line, issue.column),
  )
  issues = tuple(dedupe(merged))

  return Report(
    issues=issues,
    summary=summarize(issues),
    analyzed_at=analyzed_at or datetime.now(timezone.utc),
    language=language,
    code_lines=count_lines(source_text),
  )


def dedupe(issues: Iterable[Issue]) -> list[Issue]:
  """Drop issues repeating an earlier (line, column, message)."""
  seen: set[tuple[int, int, str]] = set()
  unique: list[Issue] = []
  for issue in issues:
    key = (issue.line, issue.column, issue.message)
    if key in seen:
      continue
    seen.add(key)
    unique.append(issue)
  return unique


def summarize(issues: Sequence[Issue]) -> Summary:
  """Count issues per severity."""
  counts = {severity: 0 for severity in Severity}
  for issue in issues:
    counts[issue.severity] += 1

  return Summary(
    errors=counts[Severity.ERROR],
    warnings=counts[Severity.WARNING],
    infos=counts[Severity.INFO],
    hints=counts[Severity.HINT],
    total=len(issues),
  )


def count_lines(source_text: str) -> int:
  return source_text.count("\n") + 1


def summary_line(report: Report) -> str:
  """Human-readable one-line summary of a report."""
  summary = report.summary
  if not summary.total:
    return "No issues found."

  counts = {
    Severity.ERROR: summary.errors,
    Severity.WARNING: summary.warnings,
    Severity.INFO: summary.infos,
    Severity.HINT: summary.hints,
  }
  parts = [f"{counts[sev]} {sev.value}" for sev in Severity if counts[sev]]

  plural = "s" if summary.total != 1 else ""
  return f"Found {summary.total} issue{plural}: {', '.join(parts)}."
