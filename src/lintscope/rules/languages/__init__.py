"""Per-language rule tables."""

from lintscope.rules.languages.go import GO_RULES
from lintscope.rules.languages.java import JAVA_RULES
from lintscope.rules.languages.javascript import JAVASCRIPT_RULES
from lintscope.rules.languages.python import PYTHON_RULES
from lintscope.rules.languages.typescript import TYPESCRIPT_RULES

__all__ = [
  "GO_RULES",
  "JAVASCRIPT_RULES",
  "JAVA_RULES",
  "PYTHON_RULES",
  "TYPESCRIPT_RULES",
]
