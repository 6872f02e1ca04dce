"""Rule abstractions for pattern-based linting."""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterator, Sequence

from lintscope.errors import RuleDefinitionError
from lintscope.models import Category, Language, Severity

MessageFn = Callable[[str], str]


class Predicate(Enum):
  """Contextual checks applied to a raw match before it becomes an issue."""

  NONE = "none"
  REQUIRES_PRECEDING_COMMENT = "requires-preceding-comment"
  REQUIRES_IMPORT_BLOCK_MEMBERSHIP = "requires-import-block-membership"
  REQUIRES_SINGLE_USAGE = "requires-single-usage"
  REQUIRES_MISSING_OVERRIDE = "requires-missing-override"


# Predicates that read the identifier or import path from capture group 1.
_CAPTURING_PREDICATES = (
  Predicate.REQUIRES_IMPORT_BLOCK_MEMBERSHIP,
  Predicate.REQUIRES_SINGLE_USAGE,
)


@dataclass(frozen=True)
class Rule:
  """A single pattern-driven detector.

  Rules are pure data. Contextual filtering is decided by ``predicate`` and
  carried out by the scanner, so a rule never inspects the text itself.
  """

  id: str
  pattern: re.Pattern[str]
  severity: Severity
  category: Category
  message: MessageFn
  suggestion: str | None = None
  predicate: Predicate = Predicate.NONE


@dataclass(frozen=True)
class ImportBlock:
  """How a language groups its imports.

  Attributes:
    pattern: Locates every import statement or block in the text.
    separator: Splits an import path; the last segment is the imported name.
    usage_suffix: Appended to the name when looking for uses of it outside
      the import block (Go packages are used as ``pkg.Member``).
  """

  pattern: re.Pattern[str]
  separator: str
  usage_suffix: str = ""


def rule(
  rule_id: str,
  pattern: str,
  severity: Severity,
  category: Category,
  message: str | MessageFn,
  suggestion: str | None = None,
  predicate: Predicate = Predicate.NONE,
  flags: int = 0,
) -> Rule:
  """Build a Rule, compiling its pattern.

  Raises:
    RuleDefinitionError: If the pattern does not compile, or the predicate
      needs a capture group the pattern does not have.
  """
  try:
    compiled = re.compile(pattern, flags)
  except re.error as e:
    raise RuleDefinitionError(f"{rule_id}: invalid pattern {pattern!r}: {e}") from e

  if predicate in _CAPTURING_PREDICATES and compiled.groups < 1:
    raise RuleDefinitionError(
      f"{rule_id}: predicate {predicate.value} requires a capture group"
    )

  if isinstance(message, str):
    text = message
    message_fn: MessageFn = lambda _match: text
  else:
    message_fn = message

  return Rule(
    id=rule_id,
    pattern=compiled,
    severity=severity,
    category=category,
    message=message_fn,
    suggestion=suggestion,
    predicate=predicate,
  )


@dataclass(frozen=True)
class RuleTable:
  """The ordered, immutable rule set for one language."""

  language: Language
  rules: tuple[Rule, ...]
  import_block: ImportBlock | None = None
  comment_markers: tuple[str, ...] = field(default=("//", "/*", "*"))

  def __post_init__(self) -> None:
    seen: set[str] = set()
    for r in self.rules:
      if r.id in seen:
        raise RuleDefinitionError(f"{self.language.value}: duplicate rule id {r.id}")
      seen.add(r.id)
      if (
        r.predicate is Predicate.REQUIRES_IMPORT_BLOCK_MEMBERSHIP
        and self.import_block is None
      ):
        raise RuleDefinitionError(
          f"{self.language.value}: {r.id} needs an import block definition"
        )

  def __iter__(self) -> Iterator[Rule]:
    return iter(self.rules)

  def __len__(self) -> int:
    return len(self.rules)

  def ids(self) -> list[str]:
    return [r.id for r in self.rules]

  def extend(self, language: Language, rules: Sequence[Rule]) -> "RuleTable":
    """Derive a table for another language with extra rules appended."""
    return RuleTable(
      language=language,
      rules=self.rules + tuple(rules),
      import_block=self.import_block,
      comment_markers=self.comment_markers,
    )


def first_match(pattern: str, text: str, default: str = "") -> str:
  """Return group 1 (or the whole match) of the first match of ``pattern``.

  Used by message functions that embed part of the matched text.
  """
  found = re.search(pattern, text)
  if not found:
    return default
  return found.group(1) if found.re.groups else found.group(0)
