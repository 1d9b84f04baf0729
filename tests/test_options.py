import pytest

from rustdrill.lessons.options import (
    Point,
    describe_point,
    describe_word,
    drain_values,
    number_table,
    print_number,
)


def test_print_number(capsys):
    assert print_number(13) == "printing: 13"
    assert capsys.readouterr().out == "printing: 13\n"


def test_print_number_missing():
    with pytest.raises(ValueError):
        print_number(None)


def test_number_table_shape():
    table = number_table()
    assert len(table) == 5
    assert table == sorted(table)
    assert all(isinstance(value, int) and value >= 0 for value in table)


def test_describe_word_present():
    assert describe_word("rustlings") == "The word is: rustlings"


def test_describe_word_missing():
    assert describe_word(None) == "The optional word doesn't contain anything"


def test_drain_values_all_present(capsys):
    values = list(range(1, 10))
    assert drain_values(values) == list(range(9, 0, -1))
    assert values == []
    assert capsys.readouterr().out.splitlines()[0] == "current value: 9"


def test_drain_values_stops_at_missing():
    values = [1, None, 3]
    assert drain_values(values) == [3]
    assert values == [1]


def test_drain_values_empty():
    assert drain_values([]) == []


def test_describe_point():
    assert describe_point(Point(100, 200)) == "Co-ordinates are 100,200 "


def test_describe_point_missing():
    assert describe_point(None) == "no match"


def test_point_still_usable_after_describe():
    point = Point(100, 200)
    describe_point(point)
    assert (point.x, point.y) == (100, 200)