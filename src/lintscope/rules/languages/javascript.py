"""JavaScript rule table."""

import re

from lintscope.models import Category, Language, Severity
from lintscope.rules.base import Predicate, RuleTable, first_match, rule
from lintscope.rules.languages.common import call_message, magic_number_message

_IDENT = r"[a-zA-Z_$][a-zA-Z0-9_$]*"


def _unused_var_message(match: str) -> str:
  name = first_match(rf"(?:const|let|var)\s+({_IDENT})", match)
  return f'Variable "{name}" may be unused'


JAVASCRIPT_RULES = RuleTable(
  language=Language.JAVASCRIPT,
  rules=(
    rule(
      "no-console",
      r"console\.(log|warn|error|info|debug)\s*\(",
      Severity.WARNING,
      Category.STYLE,
      call_message("Found {call} statement; remove it for production"),
      "Remove console statements in production or use a logging library",
    ),
    rule(
      "no-debugger",
      r"\bdebugger\b",
      Severity.ERROR,
      Category.STYLE,
      "Found debugger statement",
      "Remove the debugger statement",
    ),
    rule(
      "no-var",
      r"\bvar\s+[a-zA-Z_$]",
      Severity.WARNING,
      Category.STYLE,
      "Variable declared with var",
      "Use let or const instead of var",
    ),
    rule(
      "eqeqeq",
      r"[^=!<>]==[^=]|[^=!]!=[^=]",
      Severity.WARNING,
      Category.LOGIC,
      "Comparison with == or !=",
      "Use === or !== for strict comparison",
    ),
    rule(
      "no-magic-numbers",
      r"(?<![a-zA-Z_$0-9])(?:return|[=<>+\-*/%&|^])\s*([2-9]\d{2,}|\d{4,})(?![a-zA-Z_$0-9])",
      Severity.INFO,
      Category.STYLE,
      magic_number_message,
      "Extract the magic number into a named constant",
    ),
    rule(
      "no-alert",
      r"\balert\s*\(",
      Severity.WARNING,
      Category.STYLE,
      "Found alert() call",
      "Use a custom modal instead of alert",
    ),
    rule(
      "no-eval",
      r"\beval\s*\(",
      Severity.ERROR,
      Category.SECURITY,
      "Found eval() call",
      "eval is a security risk; avoid it",
    ),
    rule(
      "no-with",
      r"\bwith\s*\(",
      Severity.ERROR,
      Category.SYNTAX,
      "Found with statement",
      "The with statement is deprecated; avoid it",
    ),
    rule(
      "no-empty-function",
      r"(?:function[^{]*|=>)\s*\{\s*\}",
      Severity.INFO,
      Category.STYLE,
      "Empty function body",
      "If the function intentionally does nothing, add a comment saying so",
    ),
    rule(
      "no-duplicate-branch",
      r"if\s*\([^)]+\)\s*\{([^{}]*)\}\s*else\s*\{\s*\1\s*\}",
      Severity.WARNING,
      Category.LOGIC,
      "Duplicate if-else branches",
      "Both branches run the same code; simplify the condition",
    ),
    rule(
      "no-unused-vars",
      rf"(?:const|let|var)\s+({_IDENT})\s*=\s*[^;]+;\s*$",
      Severity.INFO,
      Category.STYLE,
      _unused_var_message,
      "Remove the variable if it is not used",
      predicate=Predicate.REQUIRES_SINGLE_USAGE,
      flags=re.MULTILINE,
    ),
    rule(
      "arrow-body-style",
      r"=>\s*\{\s*return\s+([^;{}]+);\s*\}",
      Severity.INFO,
      Category.STYLE,
      "Arrow function body can be simplified",
      "Drop the braces and the return keyword",
    ),
    rule(
      "no-extra-semi",
      r";{2,}",
      Severity.WARNING,
      Category.STYLE,
      "Unnecessary semicolon",
      "Remove the extra semicolons",
    ),
    rule(
      "quotes",
      r'"[^"\\]*(?:\\.[^"\\]*)*"',
      Severity.INFO,
      Category.STYLE,
      "String uses double quotes",
      "Use single quotes consistently",
    ),
  ),
)
