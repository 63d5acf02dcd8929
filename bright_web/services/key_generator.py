from __future__ import annotations

import secrets
import string
from typing import Iterable

CHARACTER_SETS = {
    "digital": string.digits,
    "lower": string.ascii_lowercase,
    "upper": string.ascii_uppercase,
    "alpha": string.ascii_letters,
    "alphanumeric": string.ascii_letters + string.digits,
    "special": "!@#$%^&*()-_=+",
}


class KeyGenerator:
    """Random keys drawn from named character classes."""

    def generate_key_from_standard(self, length: int | str, kinds: Iterable[str]) -> str:
        length = int(length)
        if length < 1:
            raise ValueError("Key length must be at least 1.")

        alphabet = ""
        for kind in kinds:
            if kind not in CHARACTER_SETS:
                raise ValueError(f"Unknown key type: {kind!r}")
            if CHARACTER_SETS[kind] not in alphabet:
                alphabet += CHARACTER_SETS[kind]

        if not alphabet:
            raise ValueError("At least one key type is required.")

        return "".join(secrets.choice(alphabet) for _ in range(length))
