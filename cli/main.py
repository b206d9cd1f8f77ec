"""linkclean CLI: resolve a share link and print its canonical form.

Usage:
    linkclean https://www.reddit.com/r/AskTheWorld/s/mONZu40JNk
    python cli/main.py --help

On success the cleaned URL is the only thing written to stdout (and it is
copied to the clipboard); errors go to stderr with exit code 1.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from linkclean.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from importlib.metadata import PackageNotFoundError, version
from typing import Optional

import typer

from linkclean.clipboard import copy_to_clipboard
from linkclean.config import settings
from linkclean.errors import LinkCleanError, RuleInvariantError
from linkclean.pipeline import canonicalize, format_url

app = typer.Typer(
    name="linkclean",
    help="Resolve a share link to its canonical, tracking-free form.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if not value:
        return
    try:
        typer.echo(f"linkclean {version('linkclean')}")
    except PackageNotFoundError:
        typer.echo("linkclean (not installed)")
    raise typer.Exit()


def _fail(message: str) -> None:
    typer.echo(message, err=True)
    raise typer.Exit(1)


@app.command()
def main(
    url: str = typer.Argument(..., metavar="URL", help="Share link to resolve."),
    resolve: bool = typer.Option(
        True, "--resolve/--no-resolve", help="Follow HTTP and meta refresh redirects first."
    ),
    generic: Optional[bool] = typer.Option(
        None,
        "--generic/--strict",
        help="Strip the query of unsupported sites instead of rejecting them.",
    ),
    copy: Optional[bool] = typer.Option(
        None, "--copy/--no-copy", help="Copy the result to the clipboard."
    ),
    strip_scheme: bool = typer.Option(False, "--strip-scheme", help="Omit the leading https://."),
    strip_subdomain: bool = typer.Option(
        False, "--strip-subdomain", help="Reduce the host to its registrable domain."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr."),
    show_version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Resolve URL and print its canonical form."""
    if verbose:
        settings.verbose = True

    try:
        cleaned = canonicalize(url, resolve_redirects=resolve, generic_fallback=generic)
        cleaned = format_url(
            cleaned, strip_scheme=strip_scheme, strip_subdomain=strip_subdomain
        )
    except LinkCleanError as exc:
        _fail(f"Error: {exc}")
    except RuleInvariantError as exc:
        _fail(f"Internal error: {exc}")

    if copy is None:
        copy = settings.copy_to_clipboard
    if copy and not copy_to_clipboard(cleaned):
        typer.echo("Warning: could not copy the URL to the clipboard", err=True)

    typer.echo(cleaned)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
