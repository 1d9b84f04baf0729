import pytest

from rustdrill.lessons.strings import current_favorite_color, is_a_color_word


def test_favorite_color():
    assert current_favorite_color() == "blue"


def test_favorite_color_is_a_color_word():
    assert is_a_color_word(current_favorite_color())


@pytest.mark.parametrize("word", ["green", "blue", "red"])
def test_known_color_words(word):
    assert is_a_color_word(word) is True


@pytest.mark.parametrize("word", ["purple", "Green", "", "green "])
def test_other_words(word):
    assert is_a_color_word(word) is False