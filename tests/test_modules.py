import time

import pytest

from rustdrill.lessons.modules import (
    favorite_snacks,
    hello,
    make_sausage,
    my_macro,
    seconds_since_epoch,
)


def test_make_sausage():
    assert make_sausage() == "sausage!"


def test_favorite_snacks():
    assert favorite_snacks() == "favorite snacks: Pear and Cucumber"


def test_seconds_since_epoch_is_current():
    before = int(time.time())
    value = seconds_since_epoch()
    after = int(time.time())
    assert before <= value <= after


def test_my_macro_without_argument():
    assert my_macro() == "Check out my macro!"


def test_my_macro_with_argument():
    assert my_macro(7777) == "Look at this other macro: 7777"


def test_my_macro_rejects_two_arguments():
    with pytest.raises(TypeError):
        my_macro(1, 2)


def test_my_macro_world():
    assert hello("world!") == "Hello world!"


def test_my_macro_goodbye():
    assert hello("goodbye!") == "Hello goodbye!"