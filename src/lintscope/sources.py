"""Locating and reading source files."""

import glob as globmod
from dataclasses import dataclass
from pathlib import Path

from lintscope.errors import FileError, UnsupportedLanguageError
from lintscope.models import Language

_EXTENSIONS: dict[str, Language] = {
  ".js": Language.JAVASCRIPT,
  ".jsx": Language.JAVASCRIPT,
  ".mjs": Language.JAVASCRIPT,
  ".cjs": Language.JAVASCRIPT,
  ".ts": Language.TYPESCRIPT,
  ".tsx": Language.TYPESCRIPT,
  ".mts": Language.TYPESCRIPT,
  ".cts": Language.TYPESCRIPT,
  ".py": Language.PYTHON,
  ".java": Language.JAVA,
  ".go": Language.GO,
}

# Directories never worth scanning
_EXCLUDED_DIRS: set[str] = {
  "node_modules",
  ".git",
  "__pycache__",
  ".venv",
  "venv",
  "dist",
  "build",
  ".next",
  "target",
  "vendor",
}


@dataclass(frozen=True)
class SourceFile:
  """A source text ready for analysis."""

  path: str
  text: str
  language: Language


def detect_language(path: str | Path) -> Language:
  """Detect a file's language from its extension.

  Raises:
    UnsupportedLanguageError: If the extension is not recognized.
  """
  suffix = Path(path).suffix.lower()
  language = _EXTENSIONS.get(suffix)
  if language is None:
    raise UnsupportedLanguageError(
      f"Cannot detect language of {path}; pass --language explicitly"
    )
  return language


def collect_sources(
  patterns: list[str],
  cwd: Path | None = None,
  language: Language | None = None,
) -> list[SourceFile]:
  """Expand patterns and read every matching file.

  Directories are searched recursively for supported extensions. When
  ``language`` is given it overrides extension-based detection.

  Raises:
    FileError: If nothing matched or a file cannot be read.
  """
  base_path = cwd or Path.cwd()
  paths = _resolve_patterns(patterns, base_path, explicit=language is not None)
  if not paths:
    raise FileError(
      f"No files matched: {', '.join(patterns)}\n"
      "Use glob patterns like: lintscope 'src/**/*.py'"
    )
  return [_read_source(p, base_path, language) for p in paths]


def _resolve_patterns(patterns: list[str], base_path: Path, explicit: bool) -> list[Path]:
  """Expand glob patterns and directories into unique file paths."""
  seen: set[Path] = set()
  result: list[Path] = []

  for pattern in patterns:
    for path in _expand_pattern(pattern, base_path):
      if path in seen or not path.is_file() or _is_excluded(path, base_path):
        continue
      # Files named directly are kept so the caller sees a clear error
      if not explicit and path.suffix.lower() not in _EXTENSIONS and _is_glob(pattern):
        continue
      seen.add(path)
      result.append(path)

  return result


def _expand_pattern(pattern: str, base_path: Path) -> list[Path]:
  """Expand a single pattern to matching paths."""
  p = Path(pattern)
  full_path = p if p.is_absolute() else base_path / p

  if full_path.is_dir():
    found: list[Path] = []
    for ext in _EXTENSIONS:
      found.extend(sorted(full_path.rglob(f"*{ext}")))
    return found

  if _is_glob(pattern):
    return [Path(match) for match in sorted(globmod.glob(str(full_path), recursive=True))]
  return [full_path]


def _is_glob(pattern: str) -> bool:
  return any(c in pattern for c in "*?[")


def _is_excluded(path: Path, base_path: Path) -> bool:
  """Check directories below ``base_path`` against the exclusion list."""
  try:
    parts = path.relative_to(base_path).parts
  except ValueError:
    parts = path.parts
  return bool(set(parts[:-1]) & _EXCLUDED_DIRS)


def _read_source(file_path: Path, base_path: Path, language: Language | None) -> SourceFile:
  """Read a file and resolve its language."""
  try:
    rel_path = str(file_path.relative_to(base_path))
  except ValueError:
    rel_path = str(file_path)

  try:
    text = file_path.read_text(encoding="utf-8")
  except (OSError, UnicodeDecodeError) as e:
    raise FileError(f"Cannot read {rel_path}: {e}") from e

  return SourceFile(
    path=rel_path,
    text=text,
    language=language or detect_language(file_path),
  )
