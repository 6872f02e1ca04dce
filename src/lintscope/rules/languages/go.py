"""Go rule table."""

import re

from lintscope.models import Category, Language, Severity
from lintscope.rules.base import ImportBlock, Predicate, RuleTable, first_match, rule
from lintscope.rules.languages.common import (
  call_message,
  magic_number_message,
  todo_message,
)

MAX_LINE_LENGTH = 119

_EXPORTED_FUNC = r"func\s+([A-Z][a-zA-Z0-9]*)"


def _exported_function_message(match: str) -> str:
  return f"Exported function {first_match(_EXPORTED_FUNC, match)} may be missing a doc comment"


GO_RULES = RuleTable(
  language=Language.GO,
  import_block=ImportBlock(
    pattern=re.compile(r"\bimport\s*\([\s\S]*?\)|^import\s+(?:[\w.]+\s+)?\"[^\"\n]*\"", re.MULTILINE),
    separator="/",
    usage_suffix=".",
  ),
  rules=(
    rule(
      "no-fmt-print",
      r"\bfmt\.(Println|Printf|Print|Sprintf)\s*\(",
      Severity.INFO,
      Category.STYLE,
      call_message("Found {call} call"),
      "Use a structured logging library (zap, logrus, slog) in production code",
    ),
    rule(
      "no-panic",
      r"\bpanic\s*\(",
      Severity.WARNING,
      Category.LOGIC,
      "Found panic() call",
      "Return an error instead of panicking",
    ),
    rule(
      "no-ignored-error",
      r",\s*_\s*:?=\s*\w+(?:\.\w+)*\s*\([^)]*\)",
      Severity.WARNING,
      Category.LOGIC,
      "Error return value may be ignored",
      "Handle the returned error",
    ),
    rule(
      "no-empty-error-handling",
      r"\bif\s+err\s*!=\s*nil\s*\{\s*\}",
      Severity.ERROR,
      Category.LOGIC,
      "Empty error handling block",
      "Handle the error inside the block",
    ),
    rule(
      "prefer-literal",
      r"\bnew\s*\(\s*[A-Z][a-zA-Z0-9]*\s*\)",
      Severity.INFO,
      Category.STYLE,
      "Struct allocated with new()",
      "Use a composite literal such as &Type{}",
    ),
    rule(
      "no-todo",
      r"//\s*(TODO|FIXME|XXX|HACK):",
      Severity.INFO,
      Category.STYLE,
      todo_message,
      "Resolve or track this item",
      flags=re.IGNORECASE,
    ),
    rule(
      "hardcoded-secret",
      r"(?:password|passwd|secret|apiKey|token)\s*:?=\s*\"[^\"]+\"",
      Severity.ERROR,
      Category.SECURITY,
      "Possible hardcoded secret",
      "Load secrets from environment variables or a config file",
      flags=re.IGNORECASE,
    ),
    rule(
      "exported-function-comment",
      rf"^{_EXPORTED_FUNC}\s*\(",
      Severity.INFO,
      Category.STYLE,
      _exported_function_message,
      "Exported functions should have a doc comment starting with their name",
      predicate=Predicate.REQUIRES_PRECEDING_COMMENT,
      flags=re.MULTILINE,
    ),
    rule(
      "uninitialized-map",
      r"\bvar\s+\w+\s+map\[[^\]]+\][^\n=]*$",
      Severity.WARNING,
      Category.LOGIC,
      "Map variable declared without initialization",
      "Initialize the map with make() or a literal",
      flags=re.MULTILINE,
    ),
    rule(
      "line-too-long",
      rf"^.{{{MAX_LINE_LENGTH + 1},}}$",
      Severity.INFO,
      Category.STYLE,
      f"Line longer than {MAX_LINE_LENGTH} characters",
      "Split the line for readability",
      flags=re.MULTILINE,
    ),
    rule(
      "empty-struct",
      r"\btype\s+\w+\s+struct\s*\{\s*\}",
      Severity.INFO,
      Category.STYLE,
      "Empty struct definition",
      "If this is a placeholder, add fields or a comment",
    ),
    rule(
      "no-magic-numbers",
      r"(?:return|[=<>+\-*/%])\s*([2-9]\d{2,}|\d{4,})(?![a-zA-Z_0-9])",
      Severity.INFO,
      Category.STYLE,
      magic_number_message,
      "Extract the magic number into a named constant",
    ),
    rule(
      "init-function",
      r"^func\s+init\s*\(\s*\)",
      Severity.INFO,
      Category.STYLE,
      "Found init() function",
      "init() can cause side effects that are hard to trace; use it sparingly",
      flags=re.MULTILINE,
    ),
    rule(
      "unused-import",
      r"\"([a-zA-Z0-9_/.-]+)\"",
      Severity.INFO,
      Category.STYLE,
      "Import may be unused",
      "Check whether this import is used",
      predicate=Predicate.REQUIRES_IMPORT_BLOCK_MEMBERSHIP,
    ),
  ),
)
