"""Message builders shared by several language tables."""

from lintscope.rules.base import first_match

_NUMBER = r"\d+"
_TODO_TAG = r"(?i)(TODO|FIXME|XXX|HACK)"


def call_message(template: str):
  """Build a message embedding the matched call without its parenthesis."""
  def message(match: str) -> str:
    return template.format(call=match[:-1].rstrip())
  return message


def magic_number_message(match: str) -> str:
  return f"Magic number {first_match(_NUMBER, match)}"


def todo_message(match: str) -> str:
  return f"Found {first_match(_TODO_TAG, match).upper()} comment"
