from rustdrill.lessons.move_semantics import (
    describe_vec,
    fill_new_vec,
    fill_vec,
    reborrow_total,
)


def test_fill_vec_leaves_input_untouched():
    vec0 = []
    vec1 = fill_vec(vec0)
    assert vec0 == []
    assert vec1 == [22, 44, 66]


def test_fill_vec_keeps_existing_items_first():
    original = [1, 2]
    filled = fill_vec(original)
    assert filled[: len(original)] == original
    assert filled[len(original):] == [22, 44, 66]


def test_fill_new_vec_is_fresh_each_time():
    first = fill_new_vec()
    first.append(88)
    assert fill_new_vec() == [22, 44, 66]


def test_describe_vec():
    assert describe_vec("vec1", [22, 44, 66]) == "vec1 has length 3 content `[22, 44, 66]`"


def test_describe_empty_vec_reports_zero_length():
    assert describe_vec("vec0", []).startswith("vec0 has length 0")


def test_reborrow_total():
    assert reborrow_total(100) == 1200