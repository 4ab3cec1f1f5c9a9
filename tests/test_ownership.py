import pytest

from rustdrill.lessons.ownership import (
    Point,
    add_through_references,
    describe_point,
    describe_word,
    fill_vec,
    format_number,
    new_filled_vec,
    optional_numbers,
    pop_all,
)


def test_fill_vec_appends_values():
    assert fill_vec([]) == [22, 44, 66]


def test_fill_vec_leaves_input_alone():
    original = [1, 2]
    result = fill_vec(original)
    assert original == [1, 2]
    assert result[:2] == [1, 2]
    assert len(result) == 5


def test_new_filled_vec_matches_fill_of_empty():
    assert new_filled_vec() == fill_vec([])


def test_add_through_references():
    assert add_through_references() == 1200


def test_format_number():
    assert format_number(13) == "printing: 13"


def test_format_missing_number_raises():
    with pytest.raises(ValueError):
        format_number(None)


def test_optional_numbers_shape():
    numbers = optional_numbers()
    assert len(numbers) == 5
    assert numbers[0] == 0
    assert numbers == sorted(numbers)
    assert numbers[4] == 77


def test_describe_word_present_and_missing():
    assert describe_word("rustlings").endswith("rustlings")
    assert describe_word(None) == "The optional word doesn't contain anything"


def test_pop_all_reverses_and_empties():
    values = [1, 2, 3]
    assert pop_all(values) == [3, 2, 1]
    assert values == []


def test_describe_point():
    assert "100,200" in describe_point(Point(x=100, y=200))
    assert describe_point(None) == "no match"