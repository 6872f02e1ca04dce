"""TypeScript rule table: the JavaScript rules plus type-system checks."""

from lintscope.models import Category, Language, Severity
from lintscope.rules.base import rule
from lintscope.rules.languages.javascript import JAVASCRIPT_RULES

TYPESCRIPT_RULES = JAVASCRIPT_RULES.extend(
  Language.TYPESCRIPT,
  (
    rule(
      "no-explicit-any",
      r":\s*any\b",
      Severity.WARNING,
      Category.STYLE,
      "Type annotated as any",
      "Use a more specific type",
    ),
    rule(
      "no-non-null-assertion",
      r"!\.",
      Severity.INFO,
      Category.STYLE,
      "Non-null assertion operator (!.)",
      "Use optional chaining (?.) or an explicit null check",
    ),
    rule(
      "no-ts-ignore",
      r"@ts-ignore",
      Severity.WARNING,
      Category.STYLE,
      "Found @ts-ignore",
      "Fix the type error instead of suppressing it",
    ),
    rule(
      "no-as-any",
      r"\bas\s+any\b",
      Severity.WARNING,
      Category.STYLE,
      "Type assertion to any",
      "Assert to a more specific type",
    ),
  ),
)
