"""Java rule table."""

import re

from lintscope.models import Category, Language, Severity
from lintscope.rules.base import ImportBlock, Predicate, RuleTable, first_match, rule
from lintscope.rules.languages.common import (
  call_message,
  magic_number_message,
  todo_message,
)

_OVERRIDABLE = r"(equals|hashCode|toString|clone|compareTo)"
_WRAPPER = r"new\s+(\w+)"


def _missing_override_message(match: str) -> str:
  return f"{first_match(_OVERRIDABLE, match)}() may be missing @Override"


def _wrapper_message(match: str) -> str:
  return f"Wrapper created with new {first_match(_WRAPPER, match)}()"


JAVA_RULES = RuleTable(
  language=Language.JAVA,
  import_block=ImportBlock(
    pattern=re.compile(r"^import\s+[\w.]+\s*;?[ \t]*$", re.MULTILINE),
    separator=".",
  ),
  rules=(
    rule(
      "no-sysout",
      r"System\.(out|err)\.(println|print|printf)\s*\(",
      Severity.WARNING,
      Category.STYLE,
      call_message("Found {call} statement"),
      "Use a Logger instead of System.out in production code",
    ),
    rule(
      "no-printstacktrace",
      r"\.printStackTrace\s*\(\s*\)",
      Severity.WARNING,
      Category.STYLE,
      "Found printStackTrace() call",
      "Log the exception with a Logger",
    ),
    rule(
      "no-empty-catch",
      r"\bcatch\s*\([^)]+\)\s*\{\s*\}",
      Severity.ERROR,
      Category.LOGIC,
      "Empty catch block",
      "At least log the exception or rethrow it",
    ),
    rule(
      "string-comparison",
      r"\bString\s+\w+[^;]*==\s*\"[^\"]*\"",
      Severity.ERROR,
      Category.LOGIC,
      "String compared with ==",
      "Compare strings with .equals()",
    ),
    rule(
      "no-magic-numbers",
      r"(?:return|[=<>+\-*/%])\s*([2-9]\d{2,}|\d{4,})(?![a-zA-Z_0-9LlFfDd])",
      Severity.INFO,
      Category.STYLE,
      magic_number_message,
      "Extract the magic number into a named constant",
    ),
    rule(
      "missing-override",
      rf"\bpublic\s+\w+\s+{_OVERRIDABLE}\s*\(",
      Severity.WARNING,
      Category.STYLE,
      _missing_override_message,
      "Annotate methods that override a superclass method with @Override",
      predicate=Predicate.REQUIRES_MISSING_OVERRIDE,
    ),
    rule(
      "avoid-new-string",
      r"\bnew\s+String\s*\(",
      Severity.WARNING,
      Category.PERFORMANCE,
      "String created with new String()",
      "Use a string literal directly",
    ),
    rule(
      "avoid-new-wrapper",
      r"\bnew\s+(Boolean|Integer|Long|Double|Float|Short|Byte|Character)\s*\(",
      Severity.WARNING,
      Category.PERFORMANCE,
      _wrapper_message,
      "Use valueOf() or autoboxing",
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
      r"(?:password|passwd|pwd|secret|apiKey)\s*=\s*\"[^\"]+\"",
      Severity.ERROR,
      Category.SECURITY,
      "Possible hardcoded secret",
      "Load secrets from configuration or environment variables",
      flags=re.IGNORECASE,
    ),
    rule(
      "unused-import",
      r"^import\s+([\w.]+)\s*;?[ \t]*$",
      Severity.INFO,
      Category.STYLE,
      "Import may be unused",
      "Check whether this import is used",
      predicate=Predicate.REQUIRES_IMPORT_BLOCK_MEMBERSHIP,
      flags=re.MULTILINE,
    ),
    rule(
      "no-public-field",
      r"\bpublic\s+(?!static\s+final|class\b|interface\b|enum\b|abstract\b)[A-Za-z<>\[\]]+\s+[a-z][a-zA-Z0-9]*\s*[;=]",
      Severity.WARNING,
      Category.STYLE,
      "Public instance field",
      "Make the field private and expose it through accessors",
    ),
    rule(
      "too-many-parameters",
      r"\([^)]*,\s*[^)]*,\s*[^)]*,\s*[^)]*,\s*[^)]*,\s*[^)]+\)",
      Severity.WARNING,
      Category.STYLE,
      "Too many parameters",
      "Group the parameters into an object or split the method",
    ),
    rule(
      "catch-generic-exception",
      r"\bcatch\s*\(\s*Exception\s+\w+\s*\)",
      Severity.WARNING,
      Category.LOGIC,
      "Catching generic Exception",
      "Catch a more specific exception type",
    ),
  ),
)
