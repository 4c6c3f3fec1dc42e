import pytest

from katas.bookseller import stock_list


def test_missing_category_counts_zero():
    books = ["BBAR 150", "CDXE 515", "BKWR 250", "BTSQ 890", "DRTY 600"]
    categories = ["A", "B", "C", "D"]
    assert stock_list(books, categories) == "(A : 0) - (B : 1290) - (C : 515) - (D : 600)"


def test_subset_of_categories():
    books = ["ABAR 200", "CDXE 500", "BKWR 250", "BTSQ 890", "DRTY 600"]
    assert stock_list(books, ["A", "B"]) == "(A : 200) - (B : 1140)"


def test_empty_stock():
    assert stock_list([], ["B", "R", "D", "X"]) == ""


def test_malformed_entry_raises():
    with pytest.raises(ValueError):
        stock_list(["ABAR"], ["A"])