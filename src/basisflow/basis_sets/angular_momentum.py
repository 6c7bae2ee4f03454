from enum import IntEnum

_LETTERS = "SPDFGH"


class AngularMomentum(IntEnum):
    """Angular momentum channel of a contracted Gaussian function.

    Values are the quantum number l, so members order naturally (S < P < D ...).
    UNSUPPORTED (-1) stands in for any letter or index outside S..H.
    """

    UNSUPPORTED = -1
    S = 0
    P = 1
    D = 2
    F = 3
    G = 4
    H = 5

    @classmethod
    def from_char(cls, ch: str) -> "AngularMomentum":
        """Map a single momentum letter (case-insensitive) to its channel."""
        if not isinstance(ch, str) or len(ch) != 1:
            return cls.UNSUPPORTED
        index = _LETTERS.find(ch.upper())
        return cls.UNSUPPORTED if index < 0 else cls(index)

    @classmethod
    def from_index(cls, n: int) -> "AngularMomentum":
        """Map a non-negative integer l to its channel."""
        if isinstance(n, bool) or not isinstance(n, int) or not 0 <= n < len(_LETTERS):
            return cls.UNSUPPORTED
        return cls(n)

    @property
    def letter(self) -> str:
        """Upper-case spectroscopic letter, empty for UNSUPPORTED."""
        return "" if self is AngularMomentum.UNSUPPORTED else _LETTERS[self.value]

    @property
    def is_supported(self) -> bool:
        return self is not AngularMomentum.UNSUPPORTED
