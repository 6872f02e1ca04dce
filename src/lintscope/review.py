"""Review orchestration around the analysis engine."""

import logging
from pathlib import Path

from lintscope.analyzer import analyze
from lintscope.config import Settings, load_config
from lintscope.errors import LintscopeError
from lintscope.models import FileReport, Language, Report
from lintscope.report import build_report
from lintscope.sources import SourceFile, collect_sources

logger = logging.getLogger(__name__)


def apply_settings(report: Report, settings: Settings, source_text: str) -> Report:
  """Filter a report's issues according to user settings.

  The filtered issues go back through the report builder so counts and
  ordering stay consistent.
  """
  disabled = set(settings.disabled_rules)
  severities = set(settings.severities)
  categories = set(settings.categories)

  kept = [
    issue for issue in report.issues
    if issue.rule not in disabled
    and issue.severity in severities
    and issue.category in categories
  ]
  if settings.max_issues is not None:
    kept = kept[:settings.max_issues]

  if len(kept) == len(report.issues):
    return report

  return build_report(kept, [], report.language, source_text, analyzed_at=report.analyzed_at)


class ReviewOrchestrator:
  """Runs the engine over sources and applies settings."""

  def __init__(self, settings: Settings | None = None):
    self.settings = settings or Settings()

  def review_text(self, text: str, language: Language | str, path: str = "<stdin>") -> FileReport:
    """Review a single in-memory snippet."""
    report = analyze(text, language)
    return FileReport(path=path, report=apply_settings(report, self.settings, text))

  def review_sources(self, sources: list[SourceFile]) -> list[FileReport]:
    """Review already-loaded source files."""
    results = []
    for source in sources:
      logger.debug("Reviewing %s as %s", source.path, source.language.value)
      results.append(self.review_text(source.text, source.language, source.path))
    return results

  def review_files(self, files: list[str], cwd: Path | None = None) -> list[FileReport]:
    """Review files matching the given paths or glob patterns."""
    sources = collect_sources(files, cwd, language=self.settings.language)
    return self.review_sources(sources)


def run_review(
  files: list[str] | None = None,
  text: str | None = None,
  language: Language | None = None,
  config_path: Path | None = None,
) -> list[FileReport]:
  """Run a review with the given options.

  Either ``files`` or ``text`` must be given; ``text`` needs a language from
  the arguments or the configuration.
  """
  settings = load_config(config_path).model_copy(deep=True)
  if language:
    settings.language = language

  orchestrator = ReviewOrchestrator(settings)

  if text is not None:
    if settings.language is None:
      raise LintscopeError("A language is required when reviewing standard input")
    return [orchestrator.review_text(text, settings.language)]
  return orchestrator.review_files(files or [])
