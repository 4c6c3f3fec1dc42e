from katas.anagrams import anagrams


def test_finds_anagrams():
    assert anagrams("abba", ["aabb", "abcd", "bbaa", "dada"]) == ["aabb", "bbaa"]


def test_no_anagrams():
    assert anagrams("laser", ["lazing", "lazy", "lacer"]) == []


def test_keeps_duplicates_and_order():
    assert anagrams("ab", ["ba", "ab", "ba", "abc"]) == ["ba", "ab", "ba"]


def test_case_sensitive():
    assert anagrams("Ab", ["ba", "bA"]) == ["bA"]