"""Quizzes over variables, functions, strings, tests and macros."""


def calculate_apple_price(n: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return n * 2 if n <= 40 else n


def quiz_strings() -> list[str]:
    """Print and return a series of derived strings."""
    values = [
        "blue",
        "red",
        "hi",
        "rust is fun!",
        "nice weather",
        "Interpolation {}".format("Station"),
        "abc"[0:1],
        "  hello there ".strip(),
        "Happy Monday!".replace("Mon", "Tues"),
        "mY sHiFt KeY iS sTiCkY".lower(),
    ]
    for value in values:
        print(value)
    return values


def times_two(num: int) -> int:
    return num * 2


def my_macro(text: str) -> str:
    return f"Hello {text}"