"""Language-keyed lookup of rule tables."""

from types import MappingProxyType

from lintscope.errors import RuleDefinitionError
from lintscope.models import Language
from lintscope.rules.base import RuleTable
from lintscope.rules.languages import (
  GO_RULES,
  JAVA_RULES,
  JAVASCRIPT_RULES,
  PYTHON_RULES,
  TYPESCRIPT_RULES,
)

_TABLES = MappingProxyType({
  Language.JAVASCRIPT: JAVASCRIPT_RULES,
  Language.TYPESCRIPT: TYPESCRIPT_RULES,
  Language.PYTHON: PYTHON_RULES,
  Language.JAVA: JAVA_RULES,
  Language.GO: GO_RULES,
})


def _verify_tables() -> None:
  """Fail at import if a language has no table or a table is misfiled."""
  missing = [lang.value for lang in Language if lang not in _TABLES]
  if missing:
    raise RuleDefinitionError(f"No rule table for: {', '.join(missing)}")

  for language, table in _TABLES.items():
    if table.language is not language:
      raise RuleDefinitionError(
        f"Rule table for {table.language.value} registered as {language.value}"
      )


_verify_tables()


def get_rule_table(language: Language | str) -> RuleTable:
  """Get the rule table for a language.

  Raises:
    UnsupportedLanguageError: If the language tag is not supported.
  """
  return _TABLES[Language.parse(language)]


def list_rules(language: Language | str) -> list[str]:
  """List the rule ids checked for a language."""
  return get_rule_table(language).ids()
