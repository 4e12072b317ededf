import pytest

from coffee_bot.services.order_interpreter.similarity import similarity


def test_equal_strings_ignore_case():
    assert similarity("Latte", "latte") == 1.0


def test_substring_shortcut():
    assert similarity("cap", "cappuccino") == 0.9
    assert similarity("lattes", "latte") == 0.9


def test_edit_distance_score():
    # one missing "p"
    assert similarity("capuccino", "cappuccino") == pytest.approx(0.9)
    assert similarity("latte", "large") == pytest.approx(0.6)
    assert similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)


def test_completely_different():
    assert similarity("abc", "xyz") == 0.0


@pytest.mark.parametrize("a", ["", "a", "oat milk", "Cappuccino"])
def test_reflexive(a):
    assert similarity(a, a) == 1.0


@pytest.mark.parametrize(
    "a,b",
    [("blah", "lat"), ("medium", "almond"), ("cap", "Cappuccino"), ("espresso", "capp")],
)
def test_symmetric(a, b):
    assert similarity(a, b) == similarity(b, a)
