"""Names exposed from nested namespaces."""

PEAR = "Pear"
APPLE = "Apple"
CUCUMBER = "Cucumber"
CARROT = "Carrot"

FRUIT = PEAR
VEGGIE = CUCUMBER


def make_sausage() -> str:
    """Print and return the sausage line."""
    text = "sausage!"
    print(text)
    return text


def favorite_snacks() -> str:
    """Print and return the favourite fruit and vegetable."""
    text = f"favorite snacks: {FRUIT} and {VEGGIE}"
    print(text)
    return text