import pytest

from roget.entropy import expected_information
from roget.game import Guess, Wordle
from roget.guessers import ConstantGuesser, EmptyPoolError, EntropyGuesser
from roget.patterns import Correctness, check
from roget.words import build_dictionary, build_frequency_table

C = Correctness.CORRECT
M = Correctness.MISPLACED
W = Correctness.WRONG


def test_constant_guesser():
    guesser = ConstantGuesser()
    assert guesser.guess(()) == "which"
    assert guesser.guess((Guess("which", (W,) * 5),)) == "which"


def test_pool_starts_as_whole_dictionary(dictionary, frequencies):
    guesser = EntropyGuesser(dictionary, frequencies)
    assert guesser.remaining == frequencies


def test_frequency_outside_dictionary_is_ignored(dictionary):
    frequencies = {"crane": 3.0, "zzzzz": 10.0}
    remaining = EntropyGuesser(dictionary, frequencies).remaining
    assert set(remaining) == set(dictionary)
    assert remaining["crane"] == 3.0
    assert remaining["slate"] == 0.0


def test_first_guess_has_highest_information(dictionary, frequencies):
    guesser = EntropyGuesser(dictionary, frequencies)
    word = guesser.guess(())

    scores = {w: expected_information(w, frequencies) for w in dictionary}
    assert scores[word] == pytest.approx(max(scores.values()))


def test_selected_candidate_beats_every_other(dictionary, frequencies):
    guesser = EntropyGuesser(dictionary, frequencies)
    word = guesser.guess(())
    by_word = {c.word: c for c in guesser.evaluate()}
    assert all(by_word[word].information >= c.information for c in by_word.values())


def test_all_correct_mask_leaves_only_that_word(dictionary, frequencies):
    guesser = EntropyGuesser(dictionary, frequencies)
    history = (Guess("crane", (C,) * 5),)
    assert guesser.guess(history) == "crane"
    assert guesser.remaining == {"crane": frequencies["crane"]}


def test_prune_keeps_consistent_words(dictionary, frequencies):
    guesser = EntropyGuesser(dictionary, frequencies)
    mask = check("trace", "crane")
    guesser.guess((Guess("crane", mask),))
    expected = {w for w in dictionary if check(w, "crane") == mask}
    assert set(guesser.remaining) == expected
    assert "trace" in expected


def test_only_latest_guess_is_applied(dictionary, frequencies):
    guesser = EntropyGuesser(dictionary, frequencies)
    first = Guess("crane", check("trace", "crane"))
    guesser.guess((first,))
    after_first = guesser.remaining

    second = Guess("slate", check("trace", "slate"))
    guesser.guess((first, second))
    assert set(guesser.remaining) <= set(after_first)
    assert "trace" in guesser.remaining


def test_equal_information_prefers_higher_weight():
    dictionary = build_dictionary(["abcde", "fghij"])
    frequencies = build_frequency_table([("abcde", 1), ("fghij", 3)])
    assert EntropyGuesser(dictionary, frequencies).guess(()) == "fghij"


def test_full_tie_prefers_earlier_word():
    dictionary = build_dictionary(["klmno", "abcde", "fghij"])
    frequencies = build_frequency_table([("klmno", 2), ("abcde", 2), ("fghij", 2)])
    assert EntropyGuesser(dictionary, frequencies).guess(()) == "abcde"


def test_weightless_pool_is_treated_as_uniform(dictionary):
    guesser = EntropyGuesser(dictionary, {})
    assert guesser.guess(()) in dictionary
    assert any(c.information > 0 for c in guesser.evaluate())


def test_inconsistent_history_empties_pool():
    dictionary = build_dictionary(["abcde", "fghij"])
    guesser = EntropyGuesser(dictionary, {"abcde": 1.0, "fghij": 1.0})
    with pytest.raises(EmptyPoolError):
        guesser.guess((Guess("abcde", (M,) * 5),))


def test_opening_is_used_on_first_turn_only(dictionary, frequencies):
    guesser = EntropyGuesser(dictionary, frequencies, opening="kebab")
    assert guesser.guess(()) == "kebab"
    history = (Guess("kebab", check("abbey", "kebab")),)
    assert guesser.guess(history) != "kebab"


def test_opening_must_be_legal(dictionary, frequencies):
    with pytest.raises(ValueError):
        EntropyGuesser(dictionary, frequencies, opening="zzzzz")


def test_solves_every_answer(dictionary, frequencies):
    wordle = Wordle(dictionary)
    for answer in sorted(dictionary):
        turns = wordle.play(answer, EntropyGuesser(dictionary, frequencies))
        assert turns is not None
        assert 1 <= turns <= len(dictionary)
