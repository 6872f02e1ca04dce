"""Lint scanner: applies a rule table to source text."""

from lintscope.models import Issue, issue_id
from lintscope.rules.base import Rule, RuleTable
from lintscope.rules.filters import ScanContext, accepts
from lintscope.rules.matching import Match, find_all, position


def scan(text: str, table: RuleTable) -> list[Issue]:
  """Run every rule of ``table`` over ``text``.

  Args:
    text: Source text to scan.
    table: Rule table for the text's language.

  Returns:
    Issues in rule order, and in text order within each rule.
  """
  context = ScanContext(text, table)
  issues: list[Issue] = []

  for rule in table:
    for match in find_all(rule.pattern, text):
      if accepts(rule, match, context):
        issues.append(_to_issue(rule, match, text))

  return issues


def _to_issue(rule: Rule, match: Match, text: str) -> Issue:
  line, column = position(text, match.start)
  return Issue(
    id=issue_id(rule.id, line, column),
    line=line,
    column=column,
    end_line=line,
    end_column=column + len(match.text),
    message=rule.message(match.text),
    severity=rule.severity,
    category=rule.category,
    rule=rule.id,
    suggestion=rule.suggestion,
  )
