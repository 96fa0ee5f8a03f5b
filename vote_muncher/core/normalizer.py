# vote_muncher/core/normalizer.py
"""
NameNormalizer - turns a raw name token from the log into a comparable Name.

Two steps, always in this order:
 - strip every character of the "noise" alphabet (letters that leak in from
   the wrong keyboard layout)
 - insert a single space wherever a lower-case letter of the "primary"
   alphabet is directly followed by an upper-case one ("ИванПетров" -> "Иван Петров")

Nothing else is touched: digits, punctuation and existing whitespace survive as-is.
"""

from __future__ import annotations

import re
from typing import Dict, NamedTuple, Optional


class Alphabet(NamedTuple):
    name: str
    lower: str  # regex character range for lower-case letters
    upper: str  # regex character range for upper-case letters


ALPHABETS: Dict[str, Alphabet] = {
    "latin": Alphabet("latin", "a-z", "A-Z"),
    "cyrillic": Alphabet("cyrillic", "а-я", "А-Я"),
}

NO_NOISE = "none"


class UnknownAlphabetError(ValueError):
    """Raised when an alphabet name is not one of ALPHABETS."""


def get_alphabet(name: str) -> Alphabet:
    try:
        return ALPHABETS[name.strip().lower()]
    except KeyError:
        raise UnknownAlphabetError(
            f"unknown alphabet {name!r} (expected one of: {', '.join(sorted(ALPHABETS))})"
        ) from None


class NameNormalizer:
    """
    Callable normalizer. Defaults match the original vote logs:
    Latin letters are noise and Cyrillic is the script names are written in.

    Args:
    noise: alphabet name to strip, or "none" / None to keep everything.
    primary: alphabet name whose case transitions separate words.
    """

    def __init__(self, noise: Optional[str] = "latin", primary: str = "cyrillic"):
        self.primary = get_alphabet(primary)
        if noise is None or noise.strip().lower() == NO_NOISE:
            self.noise = None
        else:
            self.noise = get_alphabet(noise)
            if self.noise.name == self.primary.name:
                raise ValueError("noise and primary alphabets must differ")

        self._noise_re = (
            re.compile(f"[{self.noise.lower}{self.noise.upper}]") if self.noise else None
        )
        self._split_re = re.compile(f"([{self.primary.lower}])([{self.primary.upper}])")

    def normalize(self, raw: str) -> str:
        """Strip noise letters, then split camel-cased words. Never raises, may return ''."""
        cleaned = self._noise_re.sub("", raw) if self._noise_re else raw
        return self._split_re.sub(r"\1 \2", cleaned)

    __call__ = normalize

    def __repr__(self) -> str:
        noise = self.noise.name if self.noise else NO_NOISE
        return f"NameNormalizer(noise={noise!r}, primary={self.primary.name!r})"


_default = NameNormalizer()


def normalize_name(raw: str) -> str:
    """Normalize with the default (Latin noise, Cyrillic primary) rules."""
    return _default.normalize(raw)
