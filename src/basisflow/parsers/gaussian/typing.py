from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import TypeAlias

from basisflow.exceptions import ConfigurationError

# Any source of text lines: an open file, str.splitlines(), a list, a generator.
# Read failures surface as exceptions raised while iterating.
LineSource: TypeAlias = Iterable[str]


@dataclass(frozen=True)
class AtomAssignment:
    """Basis set declared for every atom carrying this label (e.g. "C")."""

    label: str


@dataclass(frozen=True)
class ParticleIndexAssignment:
    """Basis set declared for one particle of the molecule, 0-based."""

    index: int


BasisSetAssignment: TypeAlias = AtomAssignment | ParticleIndexAssignment


@dataclass(frozen=True)
class CgtoDeclaration:
    """The ``<momentum code> <primitive count> [scale]`` line opening a CGTO block."""

    momentum_code: str
    num_primitives: int


@dataclass(frozen=True)
class ParserOptions:
    """Options controlling the Gaussian basis set parser.

    Attributes:
        strict_columns: Reject primitive lines with more columns than
            ``1 + len(momentum_code)``. Too few columns is always an error.
        comment_prefix: Lines starting with this (after leading blanks) are skipped.
        end_marker: Lines starting with this (after leading blanks) end a block.
    """

    strict_columns: bool = True
    comment_prefix: str = "!"
    end_marker: str = "****"

    def __post_init__(self) -> None:
        if not self.comment_prefix:
            raise ConfigurationError("ParserOptions comment_prefix cannot be empty.")
        if not self.end_marker:
            raise ConfigurationError("ParserOptions end_marker cannot be empty.")
        if self.end_marker.startswith(self.comment_prefix):
            raise ConfigurationError(
                f"end_marker '{self.end_marker}' would be swallowed by comment_prefix '{self.comment_prefix}'."
            )

    def set_strict_columns(self, strict_columns: bool) -> "ParserOptions":
        """Return a copy with column-count checking switched on or off."""
        return replace(self, strict_columns=strict_columns)


DEFAULT_OPTIONS = ParserOptions()
