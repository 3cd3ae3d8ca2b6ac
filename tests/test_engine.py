import pytest
from packages.engine import (
    BLANK, blank_pattern, render_pattern, count_blanks, is_revealed, display_pattern,
    partition, family_sizes, Difficulty, rank_families, select_family,
    filter_candidates, validate_letter,
)
from packages.engine.selection import choose_rank, family_rank_key, is_mercy_turn


# --- patterns ---
@pytest.mark.parametrize("word,revealed,expected", [
    ("bat", set(), "---"),
    ("bat", {"a"}, "-a-"),
    ("bet", {"b", "t"}, "b-t"),
    ("level", {"e"}, "-e-e-"),
    ("level", {"l", "e", "v"}, "level"),
])
def test_render_pattern(word, revealed, expected):
    assert render_pattern(word, revealed) == expected

def test_pattern_helpers():
    assert blank_pattern(4) == BLANK * 4
    assert count_blanks("b-t") == 1
    assert is_revealed("bat") and not is_revealed("b-t")
    assert display_pattern("b-t") == "b - t"
    with pytest.raises(ValueError):
        blank_pattern(0)


# --- partitioner ---
def test_partition_bat_bet_bit():
    fams = partition({"bat", "bet", "bit"}, set(), "a")
    assert fams == {"-a-": frozenset({"bat"}), "---": frozenset({"bet", "bit"})}
    assert family_sizes(fams) == {"---": 2, "-a-": 1}
    assert list(family_sizes(fams)) == ["---", "-a-"]

def test_partition_uses_previous_guesses():
    fams = partition({"bet", "bit"}, {"a", "b"}, "t")
    assert fams == {"b-t": frozenset({"bet", "bit"})}

def test_partition_is_complete_and_disjoint():
    words = {"ally", "beta", "cool", "deal", "else", "flew", "good", "hope", "ibex", "lull"}
    fams = partition(words, {"e"}, "l")
    seen = set()
    for patt, fam in fams.items():
        assert fam, "families are never empty"
        assert not (seen & fam)
        seen |= fam
        assert all(render_pattern(w, {"e", "l"}) == patt for w in fam)
    assert seen == words

def test_partition_is_deterministic_and_order_independent():
    words = ["ally", "beta", "cool", "deal", "else", "flew"]
    assert partition(words, set(), "e") == partition(reversed(words), set(), "e")

def test_partition_empty():
    assert partition(set(), set(), "a") == {}


# --- ranker / selector ---
def test_rank_key_orders_size_then_blanks_then_pattern():
    assert family_rank_key("---", 2) < family_rank_key("-a-", 1)
    assert family_rank_key("a--", 5) < family_rank_key("ab-", 5)
    assert family_rank_key("-a-", 3) < family_rank_key("a--", 3)

def test_tie_break_size_then_blanks():
    # sizes [5, 5, 3], blanks [2, 1, 3]
    fams = {"a--": 5, "ab-": 5, "---": 3}
    assert rank_families(fams) == [("a--", 5), ("ab-", 5), ("---", 3)]
    assert select_family(fams, Difficulty.HARD, 0) == "a--"

def test_rank_accepts_word_sets():
    fams = partition({"bat", "bet", "bit"}, set(), "a")
    assert rank_families(fams) == [("---", 2), ("-a-", 1)]

def test_select_is_deterministic():
    fams = {"a--": 5, "ab-": 5, "---": 3, "--b": 5}
    picks = {select_family(dict(reversed(list(fams.items()))), Difficulty.EASY, 2)
             for _ in range(10)}
    assert picks == {select_family(fams, Difficulty.EASY, 2)}

@pytest.mark.parametrize("difficulty,mercy_turns", [
    (Difficulty.EASY, {0, 2, 4, 6}),
    (Difficulty.MEDIUM, {0, 4}),
    (Difficulty.HARD, set()),
])
def test_mercy_cadence(difficulty, mercy_turns):
    fams = {"a--": 5, "ab-": 5, "---": 3}
    for turn in range(8):
        expected = "ab-" if turn in mercy_turns else "a--"
        assert select_family(fams, difficulty, turn) == expected
        assert is_mercy_turn(difficulty, turn) == (turn in mercy_turns)

def test_mercy_with_single_family_falls_back():
    assert choose_rank(Difficulty.EASY, 0, 1) == 0
    assert select_family({"b-t": 2}, Difficulty.EASY, 0) == "b-t"

def test_select_empty_raises():
    with pytest.raises(ValueError):
        select_family({}, Difficulty.HARD, 0)

def test_difficulty_parse():
    assert Difficulty.parse("easy") is Difficulty.EASY
    assert Difficulty.parse(" Medium ") is Difficulty.MEDIUM
    assert Difficulty.parse(Difficulty.HARD) is Difficulty.HARD
    with pytest.raises(ValueError):
        Difficulty.parse("brutal")


# --- public-information filter / validation ---
def test_filter_candidates_from_pattern():
    words = ["bat", "bet", "bit", "tab", "bats", "but"]
    cand = filter_candidates(words, "b-t", {"a", "b", "t"}, N=3)
    # 'bat' would show its 'a'; 'bats' is the wrong length
    assert cand == ["bet", "bit", "but"]

def test_validate_letter():
    assert validate_letter("a") is True
    assert validate_letter("ab") is False
    assert validate_letter("-") is False
    assert validate_letter("2") is True
    assert validate_letter("'") is True
    assert validate_letter("") is False
    assert validate_letter(7) is False
