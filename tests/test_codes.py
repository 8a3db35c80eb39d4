import random

from utils.codes import (
    ROOM_CODE_ALPHABET,
    ROOM_CODE_LENGTH,
    generate_room_code,
    is_valid_room_code,
    normalize_room_code,
)


def test_alphabet_excludes_ambiguous_glyphs():
    assert len(ROOM_CODE_ALPHABET) == 32
    for ch in "01OI":
        assert ch not in ROOM_CODE_ALPHABET


def test_generated_codes_use_restricted_alphabet():
    for _ in range(200):
        code = generate_room_code()
        assert len(code) == ROOM_CODE_LENGTH
        assert is_valid_room_code(code)


def test_seeded_generator_is_reproducible():
    assert generate_room_code(random.Random(7)) == generate_room_code(random.Random(7))


def test_validity_checks():
    assert not is_valid_room_code("ABC12")      # too short
    assert not is_valid_room_code("ABCDE0")     # ambiguous zero
    assert not is_valid_room_code("abcdef")     # lowercase
    assert not is_valid_room_code(None)


def test_normalize_room_code():
    assert normalize_room_code("  xk7p2q ") == "XK7P2Q"
