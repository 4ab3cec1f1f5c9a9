import pytest

from rustdrill.lessons.errors import (
    CreationError,
    ParsePosNonzeroError,
    PositiveNonzeroInteger,
    generate_nametag_text,
    parse_pos_nonzero,
    purchase,
    total_cost,
)


def test_generates_nametag_text_for_a_nonempty_name():
    assert generate_nametag_text("Beyoncé") == "Hi! My name is Beyoncé"


def test_explains_why_generating_nametag_text_fails():
    with pytest.raises(ValueError) as info:
        generate_nametag_text("")
    assert str(info.value) == "`name` was empty; it must be nonempty."


def test_item_quantity_is_a_valid_number():
    assert total_cost("34") == 171


def test_item_quantity_is_an_invalid_number():
    with pytest.raises(ValueError) as info:
        total_cost("beep boop")
    assert str(info.value) == "invalid digit found in string"


def test_item_quantity_empty():
    with pytest.raises(ValueError) as info:
        total_cost("")
    assert str(info.value) == "cannot parse integer from empty string"


def test_item_quantity_rejects_whitespace():
    with pytest.raises(ValueError, match="invalid digit"):
        total_cost(" 3")


def test_purchase_affordable():
    assert purchase(100, "8") == "You now have 59 tokens."


def test_purchase_unaffordable():
    assert purchase(10, "8") == "You can't afford that many!"


def test_creation():
    assert PositiveNonzeroInteger(10).value == 10
    with pytest.raises(CreationError) as negative:
        PositiveNonzeroInteger(-10)
    assert negative.value.reason is CreationError.NEGATIVE
    with pytest.raises(CreationError) as zero:
        PositiveNonzeroInteger(0)
    assert zero.value.reason is CreationError.ZERO


def test_creation_error_messages():
    assert str(CreationError(CreationError.NEGATIVE)) == "number is negative"
    assert str(CreationError(CreationError.ZERO)) == "number is zero"


def test_parse_error():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("not a number")
    assert info.value.kind is ParsePosNonzeroError.PARSE_INT


def test_negative():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("-555")
    assert info.value.kind is ParsePosNonzeroError.CREATION
    assert info.value.source.reason is CreationError.NEGATIVE


def test_zero():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("0")
    assert info.value.kind is ParsePosNonzeroError.CREATION
    assert info.value.source.reason is CreationError.ZERO


def test_positive():
    assert parse_pos_nonzero("42") == PositiveNonzeroInteger(42)