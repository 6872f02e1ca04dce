"""CLI interface using Typer."""

import os
import sys
import traceback
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from lintscope import __version__
from lintscope.errors import LintscopeError
from lintscope.logging_config import configure_logging
from lintscope.models import FileReport, Language
from lintscope.output import get_formatter
from lintscope.review import run_review
from lintscope.rules.registry import list_rules

app = typer.Typer(
  name="lintscope",
  help="Rule-based static review for JavaScript, TypeScript, Python, Java and Go",
  no_args_is_help=False,
)

console = Console()


def _is_debug() -> bool:
  return os.environ.get("LINTSCOPE_DEBUG", "").lower() in ("1", "true", "yes")


def version_callback(value: bool) -> None:
  if value:
    console.print(f"lintscope {__version__}")
    raise typer.Exit()


@app.command()
def main(
  files: Optional[list[str]] = typer.Argument(
    None,
    help="Files, directories or glob patterns to review; '-' reads standard input",
  ),
  language: str = typer.Option(
    None, "--language", "-l", help="Language: javascript, typescript, python, java, go"
  ),
  format_type: str = typer.Option(
    "terminal", "--format", help="Output format: terminal, json, markdown, github"
  ),
  config: Path = typer.Option(None, "--config", "-c", help="Config file path"),
  exit_code: bool = typer.Option(
    False, "--exit-code", help="Exit with status 1 when any error-severity issue is found"
  ),
  show_rules: bool = typer.Option(
    False, "--list-rules", help="List the rules checked for --language and exit"
  ),
  debug: bool = typer.Option(False, "--debug", "-d", help="Show debug logs and full tracebacks"),
  version: bool = typer.Option(None, "--version", "-v", callback=version_callback, is_eager=True),
) -> None:
  """Review source files for style, logic, security and naming issues.

  With '-' as the only argument, reviews standard input (requires --language).
  """
  show_traceback = debug or _is_debug()
  configure_logging(show_traceback)

  try:
    lang = Language.parse(language) if language else None

    if show_rules:
      _print_rules(lang)
      return

    if not files:
      console.print("[red]Error:[/red] No files given. Pass paths, globs, or '-' for stdin.")
      raise typer.Exit(1)

    if files == ["-"]:
      text = sys.stdin.read()
      results = run_review(text=text, language=lang, config_path=config)
    else:
      results = run_review(files=files, language=lang, config_path=config)

    formatter = get_formatter(format_type)
    output = formatter.format(results)
    if output:
      console.print(output, markup=False, highlight=False, emoji=False, soft_wrap=True)

  except typer.Exit:
    raise
  except LintscopeError as e:
    console.print(f"[red]Error:[/red] {e}")
    raise typer.Exit(1) from None
  except Exception as e:
    console.print(f"[red]Error:[/red] {e}")
    if show_traceback:
      console.print("\n[dim]Traceback:[/dim]")
      console.print(traceback.format_exc())
    raise typer.Exit(1) from None

  if exit_code and _has_errors(results):
    raise typer.Exit(1)


def _print_rules(language: Language | None) -> None:
  languages = [language] if language else list(Language)
  for lang in languages:
    console.print(f"[bold]{lang.value}[/bold]")
    for rule_id in list_rules(lang):
      console.print(f"  {rule_id}")


def _has_errors(results: list[FileReport]) -> bool:
  return any(result.report.has_errors for result in results)


if __name__ == "__main__":
  app()
