"""Identifier naming-convention checks and restyling."""

import re
from dataclasses import dataclass
from types import MappingProxyType

from lintscope.models import (
  Category,
  IdentifierKind,
  Issue,
  Language,
  NamingStyle,
  Severity,
  issue_id,
)
from lintscope.rules.matching import find_all, position

STYLE_PATTERNS: dict[NamingStyle, re.Pattern[str]] = {
  NamingStyle.CAMEL: re.compile(r"^[a-z][a-zA-Z0-9]*$"),
  NamingStyle.PASCAL: re.compile(r"^[A-Z][a-zA-Z0-9]*$"),
  NamingStyle.SNAKE: re.compile(r"^[a-z][a-z0-9_]*$"),
  NamingStyle.SCREAMING_SNAKE: re.compile(r"^[A-Z][A-Z0-9_]*$"),
  NamingStyle.KEBAB: re.compile(r"^[a-z][a-z0-9-]*$"),
}

_SEPARATORS = re.compile(r"[-_]+")
_BEFORE_UPPER = re.compile(r"(?=[A-Z])")


def split_words(name: str) -> list[str]:
  """Split an identifier into lowercase words.

  Mixed-case parts break before every uppercase letter, so ``getXY`` gives
  get, x, y. All-caps parts such as ``MAX`` stay one word.
  """
  words: list[str] = []
  for part in _SEPARATORS.split(name):
    if part != part.upper():
      words.extend(w for w in _BEFORE_UPPER.split(part) if w)
    elif part:
      words.append(part)
  return [w.lower() for w in words]


def convert_to_style(name: str, style: NamingStyle) -> str:
  """Rewrite ``name`` in ``style``.

  A name already in ``style`` is returned unchanged, which also makes
  applying the same style to the result a no-op.
  """
  if matches_style(name, style):
    return name

  words = split_words(name)
  if not words:
    return name

  if style is NamingStyle.CAMEL:
    return words[0] + "".join(w.capitalize() for w in words[1:])
  if style is NamingStyle.PASCAL:
    return "".join(w.capitalize() for w in words)
  if style is NamingStyle.SNAKE:
    return "_".join(words)
  if style is NamingStyle.SCREAMING_SNAKE:
    return "_".join(words).upper()
  return "-".join(words)


def matches_style(name: str, style: NamingStyle) -> bool:
  return STYLE_PATTERNS[style].match(name) is not None


@dataclass(frozen=True)
class NamingConvention:
  """Expected style for one identifier kind in one language.

  Attributes:
    kind: Identifier kind this convention covers.
    extractor: Pattern whose first participating group is the declared name.
    style: Style suggestions are rewritten to.
    also_accepts: Other styles that are not reported.
    leading: Prefix characters ignored when checking and kept when restyling.
  """

  kind: IdentifierKind
  extractor: re.Pattern[str]
  style: NamingStyle
  also_accepts: tuple[NamingStyle, ...] = ()
  leading: str = ""

  def accepts(self, name: str) -> bool:
    core = name.lstrip(self.leading)
    if not core:
      return True
    return any(matches_style(core, s) for s in (self.style, *self.also_accepts))

  def suggest(self, name: str) -> str:
    core = name.lstrip(self.leading)
    prefix = name[:len(name) - len(core)]
    return prefix + convert_to_style(core, self.style)


def _conventions(
  leading: str,
  variable: tuple[str, NamingStyle],
  function: tuple[str, NamingStyle],
  cls: tuple[str, NamingStyle],
  constant: tuple[str, NamingStyle],
  mixed_caps: bool = False,
) -> tuple[NamingConvention, ...]:
  specs = (
    (IdentifierKind.CLASS, cls),
    (IdentifierKind.FUNCTION, function),
    (IdentifierKind.CONSTANT, constant),
    (IdentifierKind.VARIABLE, variable),
  )
  result = []
  for kind, (pattern, style) in specs:
    also: tuple[NamingStyle, ...] = ()
    if mixed_caps:
      also = (NamingStyle.PASCAL,) if style is NamingStyle.CAMEL else (NamingStyle.CAMEL,)
    result.append(NamingConvention(
      kind=kind,
      extractor=re.compile(pattern, re.MULTILINE),
      style=style,
      also_accepts=also,
      leading=leading,
    ))
  return tuple(result)


_JS_IDENT = r"[a-zA-Z_$][a-zA-Z0-9_$]*"
_JS_LITERAL = r"(?:-?\d|[\"'`]|true\b|false\b)"
_JS_METHOD = (
  rf"(?<![\w$.])(?!(?:if|for|while|switch|catch|function|return)\b)"
  rf"({_JS_IDENT})\s*\([^)]*\)\s*\{{"
)

_JAVASCRIPT = _conventions(
  leading="_$",
  variable=(rf"\b(?:let|var)\s+({_JS_IDENT})", NamingStyle.CAMEL),
  function=(
    rf"\bfunction\s+({_JS_IDENT})"
    rf"|\b(?:const|let|var)\s+({_JS_IDENT})\s*=\s*(?:async\s*)?\("
    rf"|{_JS_METHOD}",
    NamingStyle.CAMEL,
  ),
  cls=(rf"\bclass\s+({_JS_IDENT})", NamingStyle.PASCAL),
  constant=(rf"^const\s+([A-Z][a-zA-Z0-9_$]*)\s*=\s*{_JS_LITERAL}", NamingStyle.SCREAMING_SNAKE),
)

_TYPESCRIPT = _conventions(
  leading="_$",
  variable=(rf"\b(?:let|var)\s+({_JS_IDENT})", NamingStyle.CAMEL),
  function=(
    rf"\bfunction\s+({_JS_IDENT})"
    rf"|\b(?:const|let|var)\s+({_JS_IDENT})\s*(?::\s*[^=]+)?\s*=\s*(?:async\s*)?\("
    rf"|{_JS_METHOD}",
    NamingStyle.CAMEL,
  ),
  cls=(rf"\b(?:class|interface|type)\s+({_JS_IDENT})", NamingStyle.PASCAL),
  constant=(
    rf"^(?:export\s+)?const\s+([A-Z][a-zA-Z0-9_$]*)\s*(?::\s*\w+\s*)?=\s*{_JS_LITERAL}",
    NamingStyle.SCREAMING_SNAKE,
  ),
)

_PY_IDENT = r"[a-zA-Z_][a-zA-Z0-9_]*"

_PYTHON = _conventions(
  leading="_",
  variable=(rf"^({_PY_IDENT})\s*=(?!=)", NamingStyle.SNAKE),
  function=(rf"\bdef\s+({_PY_IDENT})", NamingStyle.SNAKE),
  cls=(rf"\bclass\s+({_PY_IDENT})", NamingStyle.PASCAL),
  constant=(r"^([A-Z][A-Z0-9]*_[A-Za-z0-9_]*)\s*=(?!=)", NamingStyle.SCREAMING_SNAKE),
)

_JAVA_TYPE = r"[\w<>\[\]]+"
_JAVA_MODIFIERS = r"(?:(?:public|private|protected|static|final|abstract|synchronized)\s+)*"
_JAVA_KEYWORDS = (
  r"(?:new|return|throw|else|public|private|protected|static|final|abstract|synchronized)\b"
)

_JAVA = _conventions(
  leading="_$",
  variable=(
    rf"\b(?:int|String|boolean|char|double|float|long|short|byte|var)\s+({_JS_IDENT})",
    NamingStyle.CAMEL,
  ),
  function=(
    # Declarations start a line or follow a brace or semicolon.
    rf"(?:^|(?<=[{{;}}]))[ \t]*{_JAVA_MODIFIERS}"
    rf"(?!{_JAVA_KEYWORDS}){_JAVA_TYPE}\s+({_JS_IDENT})\s*\(",
    NamingStyle.CAMEL,
  ),
  cls=(rf"\b(?:class|interface|enum)\s+({_JS_IDENT})", NamingStyle.PASCAL),
  constant=(
    rf"\bstatic\s+final\s+{_JAVA_TYPE}\s+([A-Z][a-zA-Z0-9_]*)\s*=",
    NamingStyle.SCREAMING_SNAKE,
  ),
)

_GO_IDENT = r"[a-zA-Z_][a-zA-Z0-9_]*"

# Go capitalization decides visibility, so exported and unexported forms are
# both valid for every kind.
_GO = _conventions(
  leading="",
  variable=(rf"\bvar\s+({_GO_IDENT})|\b({_GO_IDENT})\s*:=", NamingStyle.CAMEL),
  function=(rf"\bfunc\s+(?:\([^)]*\)\s*)?({_GO_IDENT})", NamingStyle.CAMEL),
  cls=(rf"\btype\s+({_GO_IDENT})\s+(?:struct|interface)\b", NamingStyle.PASCAL),
  constant=(rf"\bconst\s+({_GO_IDENT})", NamingStyle.PASCAL),
  mixed_caps=True,
)

CONVENTIONS = MappingProxyType({
  Language.JAVASCRIPT: _JAVASCRIPT,
  Language.TYPESCRIPT: _TYPESCRIPT,
  Language.PYTHON: _PYTHON,
  Language.JAVA: _JAVA,
  Language.GO: _GO,
})

_SEVERITY = {
  IdentifierKind.CLASS: Severity.ERROR,
  IdentifierKind.FUNCTION: Severity.WARNING,
  IdentifierKind.VARIABLE: Severity.WARNING,
  IdentifierKind.CONSTANT: Severity.WARNING,
}


def check_naming(text: str, language: Language | str) -> list[Issue]:
  """Report declared identifiers that break the language's conventions.

  Every kind's extractor reports each failing identifier, so a declaration
  matching two kinds (an arrow function bound with ``let``) yields two issues.
  Variables that already satisfy the constant convention are not reported.

  Args:
    text: Source text.
    language: Language whose conventions apply.

  Returns:
    Naming issues whose suggestion is the restyled identifier.
  """
  conventions = CONVENTIONS[Language.parse(language)]
  constant = next(c for c in conventions if c.kind is IdentifierKind.CONSTANT)

  issues: list[Issue] = []

  for convention in conventions:
    for match in find_all(convention.extractor, text):
      declared = match.first_group()
      if declared is None:
        continue
      _, name = declared
      if convention.accepts(name):
        continue
      if convention.kind is IdentifierKind.VARIABLE and constant.accepts(name):
        continue

      issues.append(_naming_issue(convention, name, text, match.start))

  return issues


def _naming_issue(
  convention: NamingConvention,
  name: str,
  text: str,
  offset: int,
) -> Issue:
  line, column = position(text, offset)
  rule_id = f"naming/{convention.kind.value}"
  suggested = convention.suggest(name)
  label = convention.kind.value.capitalize()
  return Issue(
    id=issue_id(rule_id, line, column),
    line=line,
    column=column,
    message=(
      f'{label} "{name}" does not follow the {convention.style.value} '
      f"naming convention"
    ),
    severity=_SEVERITY[convention.kind],
    category=Category.NAMING,
    rule=rule_id,
    suggestion=suggested,
    fixed_code=suggested,
  )
