"""Styled terminal messages for exercise progress."""

from __future__ import annotations

import os

from rich.console import Console
from rich.markup import escape

_WARN_SYMBOL = "⚠️ "
_WARN_FALLBACK = "!"
_SUCCESS_SYMBOL = "✅"
_SUCCESS_FALLBACK = "✓"


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _console() -> Console:
    return Console(highlight=False, emoji=False, soft_wrap=True)


def _emit(symbol: str, fallback: str, style: str, message: str) -> None:
    prefix = fallback if no_emoji() else symbol
    _console().print(
        f"[{style}]{escape(prefix)}[/{style}] [{style}]{escape(str(message))}[/{style}]"
    )


def warn(message: str) -> None:
    """Print a warning line in red."""
    _emit(_WARN_SYMBOL, _WARN_FALLBACK, "red", message)


def success(message: str) -> None:
    """Print a success line in green."""
    _emit(_SUCCESS_SYMBOL, _SUCCESS_FALLBACK, "green", message)


def bold(text: object) -> str:
    """Return console markup rendering ``text`` in bold."""
    return f"[bold]{escape(str(text))}[/bold]"


def blue(text: object) -> str:
    """Return console markup rendering ``text`` in blue."""
    return f"[blue]{escape(str(text))}[/blue]"