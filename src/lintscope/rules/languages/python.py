"""Python rule table."""

import re

from lintscope.models import Category, Language, Severity
from lintscope.rules.base import RuleTable, rule
from lintscope.rules.languages.common import todo_message

# PEP 8 limit.
MAX_LINE_LENGTH = 79


def _boolean_comparison_message(match: str) -> str:
  return f"Unnecessary comparison to a boolean: {match}"


PYTHON_RULES = RuleTable(
  language=Language.PYTHON,
  comment_markers=("#",),
  rules=(
    rule(
      "no-print",
      r"\bprint\s*\(",
      Severity.INFO,
      Category.STYLE,
      "Found print() call",
      "Use the logging module instead of print in production code",
    ),
    rule(
      "simplify-boolean",
      r"==\s*(True|False)\b",
      Severity.WARNING,
      Category.STYLE,
      _boolean_comparison_message,
      "Use the value directly or the not operator",
    ),
    rule(
      "use-is-none",
      r"==\s*None\b",
      Severity.WARNING,
      Category.STYLE,
      "Comparison to None with ==",
      "Use 'is None' instead of '== None'",
    ),
    rule(
      "use-is-not-none",
      r"!=\s*None\b",
      Severity.WARNING,
      Category.STYLE,
      "Comparison to None with !=",
      "Use 'is not None' instead of '!= None'",
    ),
    rule(
      "bare-except",
      r"\bexcept\s*:",
      Severity.WARNING,
      Category.LOGIC,
      "Bare except catches every exception",
      "Catch a specific exception type, or at least 'except Exception:'",
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
      "no-exec",
      r"\bexec\s*\(",
      Severity.ERROR,
      Category.SECURITY,
      "Found exec() call",
      "exec is a security risk; avoid it",
    ),
    rule(
      "line-too-long",
      rf"^.{{{MAX_LINE_LENGTH + 1},}}$",
      Severity.INFO,
      Category.STYLE,
      f"Line longer than {MAX_LINE_LENGTH} characters",
      f"PEP 8 recommends keeping lines at or under {MAX_LINE_LENGTH} characters",
      flags=re.MULTILINE,
    ),
    rule(
      "no-wildcard-import",
      r"\bfrom\s+\S+\s+import\s+\*",
      Severity.WARNING,
      Category.STYLE,
      "Wildcard import",
      "Import the names you need explicitly",
    ),
    rule(
      "mutable-default-argument",
      r"\bdef\s+\w+\s*\([^)]*=\s*(\[\]|\{\})",
      Severity.ERROR,
      Category.LOGIC,
      "Mutable object used as a default argument",
      "Default to None and create the object inside the function",
    ),
    rule(
      "missing-self",
      r"\bdef\s+\w+\s*\(\s*\)\s*:",
      Severity.INFO,
      Category.SYNTAX,
      "Method may be missing the self parameter",
      "If this is a method, add the self parameter",
    ),
    rule(
      "no-todo",
      r"#\s*(TODO|FIXME|XXX|HACK):",
      Severity.INFO,
      Category.STYLE,
      todo_message,
      "Resolve or track this item",
      flags=re.IGNORECASE,
    ),
    rule(
      "no-pass",
      r"^\s*pass\s*$",
      Severity.INFO,
      Category.STYLE,
      "Found pass statement",
      "If this is a placeholder, remember to implement it",
      flags=re.MULTILINE,
    ),
    rule(
      "hardcoded-secret",
      r"(?:password|passwd|pwd|secret|api_key|apikey)\s*=\s*['\"]\w+['\"]",
      Severity.ERROR,
      Category.SECURITY,
      "Possible hardcoded secret",
      "Load secrets from environment variables or a config file",
      flags=re.IGNORECASE,
    ),
    rule(
      "empty-block",
      r"\b(?:if|for|while)\s+[^:\n]+:\s*\n\s*(?:pass|\.\.\.)\s*$",
      Severity.INFO,
      Category.STYLE,
      "Empty control block",
      "Implement the block body",
      flags=re.MULTILINE,
    ),
    rule(
      "mixed-indentation",
      r"^(?=[ \t]*(?: \t|\t ))[ \t]+",
      Severity.ERROR,
      Category.STYLE,
      "Indentation mixes spaces and tabs",
      "Indent with 4 spaces (PEP 8)",
      flags=re.MULTILINE,
    ),
    rule(
      "inconsistent-indentation",
      r"\A(?=[\s\S]*?^ *\t)(?=[\s\S]*?^\t* )",
      Severity.WARNING,
      Category.STYLE,
      "File indents with both spaces and tabs",
      "Pick one indentation style; PEP 8 recommends 4 spaces",
      flags=re.MULTILINE,
    ),
  ),
)
