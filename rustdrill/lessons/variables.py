"""Bindings, mutation, shadowing and constants."""

NUMBER = 3


def variables1() -> int:
    """Print and return a simple binding."""
    x = 5
    print(f"x has the value {x}")
    return x


def variables2() -> str:
    """Print and return the message chosen by a comparison."""
    x = 10
    message = "Ten!" if x == 10 else "Not ten!"
    print(message)
    return message


def variables3() -> list[int]:
    """Print a binding before and after it is reassigned; return both values."""
    seen = []
    x = 3
    print(f"Number {x}")
    seen.append(x)
    x = 5
    print(f"Number {x}")
    seen.append(x)
    return seen


def variables4() -> int:
    """Print and return an explicitly typed binding."""
    x: int = 10
    print(f"Number {x}")
    return x


def variables5() -> int:
    """Shadow a text binding with a number and return the number plus two."""
    number = "T-H-R-E-E"
    print(f"Spell a Number : {number}")
    value = 3
    total = value + 2
    print(f"Number plus two is : {total}")
    return total


def variables6() -> int:
    """Print and return the module constant."""
    print(f"Number {NUMBER}")
    return NUMBER