"""Core domain models for snippet review."""

import hashlib
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Sequence

from lintscope.errors import UnsupportedLanguageError


class Severity(Enum):
  """Issue severity levels."""

  ERROR = "error"
  WARNING = "warning"
  INFO = "info"
  HINT = "hint"


class Category(Enum):
  """Kind of problem an issue describes."""

  NAMING = "naming"
  SYNTAX = "syntax"
  STYLE = "style"
  LOGIC = "logic"
  PERFORMANCE = "performance"
  SECURITY = "security"


class Language(Enum):
  """Languages the engine has rule tables for."""

  JAVASCRIPT = "javascript"
  TYPESCRIPT = "typescript"
  PYTHON = "python"
  JAVA = "java"
  GO = "go"

  @classmethod
  def parse(cls, tag: "str | Language") -> "Language":
    """Resolve a language tag, failing fast on anything unsupported."""
    if isinstance(tag, Language):
      return tag
    try:
      return cls(str(tag).strip().lower())
    except ValueError:
      supported = ", ".join(lang.value for lang in cls)
      raise UnsupportedLanguageError(
        f"Unsupported language '{tag}' (expected one of: {supported})"
      ) from None


class NamingStyle(Enum):
  """Lexical identifier styles."""

  CAMEL = "camelCase"
  PASCAL = "PascalCase"
  SNAKE = "snake_case"
  SCREAMING_SNAKE = "SCREAMING_SNAKE_CASE"
  KEBAB = "kebab-case"


class IdentifierKind(Enum):
  """Declared identifier kinds checked by the naming analyzer."""

  VARIABLE = "variable"
  FUNCTION = "function"
  CLASS = "class"
  CONSTANT = "constant"


def issue_id(rule: str, line: int, column: int) -> str:
  """Deterministic issue identifier derived from rule and position."""
  digest = hashlib.sha1(f"{rule}:{line}:{column}".encode()).hexdigest()[:10]
  prefix = rule.split("/", 1)[0]
  return f"{prefix}-{digest}"


@dataclass(frozen=True)
class Issue:
  """A single located finding."""

  id: str
  line: int
  column: int
  message: str
  severity: Severity
  category: Category
  rule: str
  end_line: int | None = None
  end_column: int | None = None
  suggestion: str | None = None
  fixed_code: str | None = None


@dataclass(frozen=True)
class Summary:
  """Per-severity issue counts."""

  errors: int = 0
  warnings: int = 0
  infos: int = 0
  hints: int = 0
  total: int = 0


@dataclass(frozen=True)
class Report:
  """Result of analyzing one snippet."""

  issues: Sequence[Issue]
  summary: Summary
  analyzed_at: datetime
  language: Language
  code_lines: int

  @property
  def has_issues(self) -> bool:
    return self.summary.total > 0

  @property
  def has_errors(self) -> bool:
    """Check if the report contains ERROR severity issues."""
    return self.summary.errors > 0

  def by_category(self) -> dict[Category, list[Issue]]:
    """Group issues by category, preserving report order."""
    grouped: dict[Category, list[Issue]] = {}
    for issue in self.issues:
      grouped.setdefault(issue.category, []).append(issue)
    return grouped

  def by_severity(self) -> dict[Severity, list[Issue]]:
    """Group issues by severity, preserving report order."""
    grouped: dict[Severity, list[Issue]] = {}
    for issue in self.issues:
      grouped.setdefault(issue.severity, []).append(issue)
    return grouped


@dataclass(frozen=True)
class FileReport:
  """A report tied to the file it was produced from."""

  path: str
  report: Report
