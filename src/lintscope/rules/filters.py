"""Contextual filtering of raw matches.

Every rule predicate is evaluated here, after raw matching, so rule tables
stay declarative. The usage checks are textual occurrence counts, not scope
analysis: a name mentioned only in a comment still counts as used, and a
name reused in an unrelated scope hides a genuinely unused declaration.
"""

import re
from functools import cached_property

from lintscope.rules.base import Predicate, Rule, RuleTable
from lintscope.rules.matching import Match

OVERRIDE_ANNOTATION = "@Override"


class ScanContext:
  """Per-scan view of the text with lazily derived import information."""

  def __init__(self, text: str, table: RuleTable):
    self.text = text
    self.table = table

  @cached_property
  def import_spans(self) -> list[tuple[int, int]]:
    block = self.table.import_block
    if block is None:
      return []
    return [(m.start(), m.end()) for m in block.pattern.finditer(self.text)]

  @cached_property
  def text_outside_imports(self) -> str:
    parts: list[str] = []
    cursor = 0
    for start, end in self.import_spans:
      parts.append(self.text[cursor:start])
      cursor = end
    parts.append(self.text[cursor:])
    return "".join(parts)

  def in_import_block(self, offset: int) -> bool:
    return any(start <= offset <= end for start, end in self.import_spans)


def accepts(rule: Rule, match: Match, context: ScanContext) -> bool:
  """Decide whether a raw match should be reported."""
  if rule.predicate is Predicate.NONE:
    return True
  if rule.predicate is Predicate.REQUIRES_PRECEDING_COMMENT:
    return not has_preceding_comment(
      context.text, match.start, context.table.comment_markers
    )
  if rule.predicate is Predicate.REQUIRES_IMPORT_BLOCK_MEMBERSHIP:
    return _import_is_unused(match, context)
  if rule.predicate is Predicate.REQUIRES_SINGLE_USAGE:
    name = match.group(1)
    return bool(name) and not is_used_after(context.text, name, match.start)
  if rule.predicate is Predicate.REQUIRES_MISSING_OVERRIDE:
    return not follows_annotation(context.text, match.start, OVERRIDE_ANNOTATION)
  raise ValueError(f"Unhandled predicate: {rule.predicate}")


def has_preceding_comment(text: str, offset: int, markers: tuple[str, ...]) -> bool:
  """Check the two lines above ``offset`` for a comment."""
  before = text[:offset].split("\n")[:-1]
  for line in before[-2:]:
    stripped = line.strip()
    if stripped.startswith(markers) or stripped.endswith("*/"):
      return True
  return False


def follows_annotation(text: str, offset: int, annotation: str) -> bool:
  """Check whether only whitespace separates ``annotation`` from ``offset``."""
  return text[:offset].rstrip().endswith(annotation)


def is_used_after(text: str, name: str, offset: int) -> bool:
  """Check whether ``name`` occurs more than once from ``offset`` onward."""
  pattern = re.compile(rf"(?<![\w$]){re.escape(name)}(?![\w$])")
  count = 0
  for _ in pattern.finditer(text, offset):
    count += 1
    if count > 1:
      return True
  return False


def _import_is_unused(match: Match, context: ScanContext) -> bool:
  block = context.table.import_block
  if block is None or not context.in_import_block(match.start):
    return False

  path = match.group(1) or ""
  name = path.split(block.separator)[-1]
  if not name:
    return False
  return f"{name}{block.usage_suffix}" not in context.text_outside_imports
