import pytest

from katas.wordplay import (
    create_phone_number,
    disemvowel,
    first_non_repeating,
    get_count,
    reverse_string,
    spin_words,
    valid_parentheses,
)


def test_phone_number_layout():
    numbers = [3, 1, 4, 1, 5, 9, 2, 6, 5, 3]
    result = create_phone_number(numbers)
    assert result[0] == "("
    assert result[4:6] == ") "
    assert result[9] == "-"
    assert len(result) == 14
    assert "".join(ch for ch in result if ch.isdigit()) == "3141592653"


def test_phone_number_multi_digit_values():
    numbers = [10, 11, 12, 13, 14, 15, 16, 17, 18, 19]
    assert create_phone_number(numbers) == "(101112) 131415-16171819"


def test_phone_number_needs_ten_values():
    with pytest.raises(ValueError):
        create_phone_number([1, 2, 3])


def test_phone_number_rejects_negative():
    with pytest.raises(ValueError):
        create_phone_number([-1, 2, 3, 4, 5, 6, 7, 8, 9, 0])


@pytest.mark.parametrize(
    ("comment", "expected"),
    [
        ("This website is for losers LOL!", "Ths wbst s fr lsrs LL!"),
        ("UoIeA", ""),
    ],
)
def test_disemvowel(comment, expected):
    assert disemvowel(comment) == expected


def test_reverse_string():
    assert reverse_string("world") == "dlrow"


def test_reverse_string_twice_is_identity():
    assert reverse_string(reverse_string("abc xyz")) == "abc xyz"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Welcome", "emocleW"),
        ("to", "to"),
        ("CodeWars", "sraWedoC"),
        ("Hey fellow warriors", "Hey wollef sroirraw"),
        ("Burgers are my favorite fruit", "sregruB are my etirovaf tiurf"),
        ("Pizza is the best vegetable", "azziP is the best elbategev"),
    ],
)
def test_spin_words(text, expected):
    assert spin_words(text) == expected


def test_spin_words_empty():
    assert spin_words("") == ""


@pytest.mark.parametrize(
    ("parens", "expected"),
    [("()", True), (")", False), ("(()())", True), ("())(", False), ("(", False)],
)
def test_valid_parentheses(parens, expected):
    assert valid_parentheses(parens) is expected


def test_get_count():
    assert get_count("abracadabra") == 5


def test_get_count_ignores_uppercase():
    assert get_count("AEIOU") == 0


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("a", "a"),
        ("stress", "t"),
        ("moonmen", "e"),
        ("", ""),
        ("abba", ""),
        ("aa", ""),
        ("~><#~><", "#"),
        ("hello world, eh?", "w"),
        ("sTreSS", "T"),
        ("Go hang a salami, I'm a lasagna hog!", ","),
    ],
)
def test_first_non_repeating(text, expected):
    assert first_non_repeating(text) == expected