import random

from cipher_logic import invert_key
from guess_store import GuessStore
from normalizer import ALPHABET

SHIFT_KEY = "BCDEFGHIJKLMNOPQRSTUVWXYZA"


def _assert_injective(store):
    values = list(store.mapping.values())
    assert len(values) == len(set(values))


def test_select_toggles_selection():
    store = GuessStore()
    assert store.select_cipher_letter("x") == "X"
    assert store.select_cipher_letter("Y") == "Y"
    assert store.select_cipher_letter("Y") is None
    assert store.mapping == {}


def test_select_ignores_non_alphabet_characters():
    store = GuessStore()
    store.select_cipher_letter("Q")
    assert store.select_cipher_letter("Ñ") == "Q"
    assert store.select_cipher_letter(" ") == "Q"


def test_assign_records_mapping_and_clears_selection():
    store = GuessStore()
    store.select_cipher_letter("X")
    assert store.assign("c") is None
    assert store.mapping == {"X": "C"}
    assert store.selected is None


def test_assign_without_selection_is_noop():
    store = GuessStore()
    assert store.assign("C") is None
    assert store.mapping == {}


def test_assign_invalid_plain_letter_is_noop():
    store = GuessStore()
    store.select_cipher_letter("X")
    assert store.assign("Ñ") is None
    assert store.mapping == {}
    assert store.selected == "X"


def test_conflicting_assignment_releases_previous_holder():
    store = GuessStore()
    store.set_guess("C", "X")
    released = store.set_guess("D", "X")
    assert released == "C"
    assert store.mapping == {"D": "X"}
    assert store.cipher_for("X") == "D"
    assert store.plain_for("C") is None


def test_reassigning_same_letter_to_same_cipher_is_not_a_conflict():
    store = GuessStore()
    store.set_guess("C", "X")
    assert store.set_guess("C", "X") is None
    assert store.mapping == {"C": "X"}


def test_overwriting_a_cipher_letter_frees_its_old_plain_letter():
    store = GuessStore()
    store.set_guess("C", "X")
    store.set_guess("C", "Y")
    assert store.mapping == {"C": "Y"}
    assert "X" in store.unused_plain_letters()


def test_clear_is_idempotent():
    store = GuessStore()
    store.set_guess("C", "X")
    store.clear("c")
    store.clear("C")
    assert store.mapping == {}


def test_clear_all_and_unmapped_letters():
    store = GuessStore()
    store.set_guess("A", "B")
    store.set_guess("C", "D")
    assert "A" not in store.unmapped_cipher_letters()
    store.clear_all()
    assert store.mapping == {}
    assert store.unmapped_cipher_letters() == list(ALPHABET)
    assert store.unused_plain_letters() == list(ALPHABET)


def test_reveal_replaces_mapping_with_solution():
    store = GuessStore()
    store.set_guess("A", "A")
    store.select_cipher_letter("Q")
    store.reveal(invert_key(SHIFT_KEY))
    assert store.mapping == invert_key(SHIFT_KEY)
    assert store.selected is None
    _assert_injective(store)


def test_random_operation_sequences_keep_mapping_injective():
    rng = random.Random(99)
    store = GuessStore()
    for _ in range(2000):
        action = rng.random()
        if action < 0.7:
            store.set_guess(rng.choice(ALPHABET), rng.choice(ALPHABET))
        elif action < 0.95:
            store.clear(rng.choice(ALPHABET))
        else:
            store.clear_all()
        _assert_injective(store)


def test_set_guess_with_invalid_plain_letter_changes_nothing():
    store = GuessStore()
    store.select_cipher_letter("Q")
    assert store.set_guess("X", "Ñ") is None
    assert store.selected == "Q"
    assert store.mapping == {}


def test_clear_also_drops_selection():
    store = GuessStore()
    store.set_guess("C", "X")
    store.select_cipher_letter("D")
    store.clear("C")
    assert store.selected is None
