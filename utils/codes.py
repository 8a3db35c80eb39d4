# utils/codes.py
import random

# 0/O and 1/I are left out so codes survive being read aloud or handwritten
ROOM_CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
ROOM_CODE_LENGTH = 6

_system_random = random.SystemRandom()


def generate_room_code(rng=None) -> str:
    rng = rng or _system_random
    return "".join(rng.choices(ROOM_CODE_ALPHABET, k=ROOM_CODE_LENGTH))


def normalize_room_code(code: str) -> str:
    return code.strip().upper()


def is_valid_room_code(code) -> bool:
    return (
        isinstance(code, str)
        and len(code) == ROOM_CODE_LENGTH
        and all(ch in ROOM_CODE_ALPHABET for ch in code)
    )
