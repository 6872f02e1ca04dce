"""Engine entry point."""

import logging

from lintscope.models import Language, Report
from lintscope.naming import check_naming
from lintscope.report import build_report
from lintscope.rules.registry import get_rule_table
from lintscope.rules.scanner import scan

logger = logging.getLogger(__name__)


def analyze(source_text: str, language: Language | str) -> Report:
  """Analyze a snippet and return its report.

  The call is synchronous and shares no state with other calls, so it is
  safe to run from several threads at once.

  Args:
    source_text: Text to review.
    language: A Language or one of its tags ("python", "go", ...).

  Returns:
    Report with sorted, deduplicated issues and severity counts.

  Raises:
    UnsupportedLanguageError: If the language is not supported.
  """
  lang = Language.parse(language)
  table = get_rule_table(lang)

  scanner_issues = scan(source_text, table)
  naming_issues = check_naming(source_text, lang)
  report = build_report(scanner_issues, naming_issues, lang, source_text)

  logger.debug(
    "Analyzed %d line(s) of %s: %d lint, %d naming, %d reported",
    report.code_lines,
    lang.value,
    len(scanner_issues),
    len(naming_issues),
    report.summary.total,
  )
  return report
