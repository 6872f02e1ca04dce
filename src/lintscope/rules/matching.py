"""Match enumeration and offset-to-position mapping."""

import re
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Match:
  """One raw pattern match."""

  text: str
  groups: tuple[str | None, ...]
  start: int
  group_starts: tuple[int, ...] = ()

  @property
  def end(self) -> int:
    return self.start + len(self.text)

  def group(self, index: int) -> str | None:
    """Return capture ``index`` (1-based), or None when it did not take part."""
    if index < 1 or index > len(self.groups):
      return None
    return self.groups[index - 1]

  def first_group(self) -> tuple[int, str] | None:
    """Return (offset, text) of the first non-empty capture."""
    for value, start in zip(self.groups, self.group_starts):
      if value:
        return start, value
    return None


class Matches:
  """All non-overlapping matches of a pattern in a text.

  Lazy and restartable: each iteration scans the text afresh. Empty matches
  never stall the scan since ``re.finditer`` always moves past them.
  """

  def __init__(self, pattern: re.Pattern[str], text: str):
    self._pattern = pattern
    self._text = text

  def __iter__(self) -> Iterator[Match]:
    for m in self._pattern.finditer(self._text):
      yield Match(
        text=m.group(0),
        groups=m.groups(),
        start=m.start(),
        group_starts=tuple(m.start(i) for i in range(1, len(m.groups()) + 1)),
      )


def find_all(pattern: re.Pattern[str], text: str) -> Matches:
  return Matches(pattern, text)


def position(text: str, offset: int) -> tuple[int, int]:
  """Map a character offset to a 1-based (line, column) pair."""
  line = text.count("\n", 0, offset) + 1
  line_start = text.rfind("\n", 0, offset) + 1
  return line, offset - line_start + 1
