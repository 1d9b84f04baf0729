from rustdrill.lessons.cons_list import Cons, Nil, create_empty_list, create_non_empty_list


def test_create_empty_list():
    assert create_empty_list() == Nil()


def test_create_non_empty_list():
    non_empty = create_non_empty_list()
    assert non_empty != create_empty_list()
    assert non_empty == Cons(1, Nil())


def test_non_empty_list_ends_with_nil():
    non_empty = create_non_empty_list()
    assert non_empty.value == 1
    assert non_empty.next == Nil()