import pytest

from rustdrill.lessons.generics_traits import (
    ReportCard,
    Wrapper,
    append_bar,
    shopping_list,
)


def test_shopping_list():
    assert shopping_list() == ["milk"]


def test_store_u32_in_wrapper():
    assert Wrapper(42).value == 42


def test_store_str_in_wrapper():
    assert Wrapper("Foo").value == "Foo"


def test_generate_numeric_report_card():
    card = ReportCard(grade=2.1, student_name="Tom Wriggle", student_age=12)
    assert card.print() == "Tom Wriggle (12) - achieved a grade of 2.1"


def test_generate_alphabetic_report_card():
    card = ReportCard(grade="A+", student_name="Gary Plotter", student_age=11)
    assert card.print() == "Gary Plotter (11) - achieved a grade of A+"


def test_is_foo_bar():
    assert append_bar("Foo") == "FooBar"


def test_is_bar_bar():
    assert append_bar(append_bar("")) == "BarBar"


def test_is_vec_pop_eq_bar():
    foo = append_bar(["Foo"])
    assert foo.pop() == "Bar"
    assert foo.pop() == "Foo"


def test_append_bar_leaves_original_list():
    original = ["Foo"]
    result = append_bar(original)
    assert original == ["Foo"]
    assert result == ["Foo", "Bar"]


def test_append_bar_unsupported_type():
    with pytest.raises(TypeError):
        append_bar(3)