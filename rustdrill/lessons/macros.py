"""A printing helper that accepts zero or one argument."""

from __future__ import annotations


def my_macro(*args: object) -> str:
    """Print and return the macro line; with one argument, include it."""
    if not args:
        text = "Check out my macro!"
    elif len(args) == 1:
        text = f"Look at this other macro: {args[0]}"
    else:
        raise TypeError(f"my_macro takes at most one argument, got {len(args)}")
    print(text)
    return text