"""Rule-based static review of code snippets."""

from lintscope.analyzer import analyze
from lintscope.errors import (
  LintscopeError,
  RuleDefinitionError,
  UnsupportedLanguageError,
)
from lintscope.models import (
  Category,
  Issue,
  Language,
  NamingStyle,
  Report,
  Severity,
  Summary,
)
from lintscope.naming import check_naming, convert_to_style
from lintscope.report import build_report

__version__ = "0.1.0"

__all__ = [
  "Category",
  "Issue",
  "Language",
  "LintscopeError",
  "NamingStyle",
  "Report",
  "RuleDefinitionError",
  "Severity",
  "Summary",
  "UnsupportedLanguageError",
  "analyze",
  "build_report",
  "check_naming",
  "convert_to_style",
]
