"""Functions with parameters and return values."""


def call_me(num: int) -> list[str]:
    """Print and return one ring line per call."""
    lines = [f"Ring! Call number {i + 1}" for i in range(num)]
    for line in lines:
        print(line)
    return lines


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num