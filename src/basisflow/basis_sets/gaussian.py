from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class GaussianPrimitive:
    """A single Gaussian primitive of a contraction.

    The fields follow the column order of a Gaussian primitive line:
    ``coefficient`` is column 0, ``exponent`` the column of the owning channel.
    """

    coefficient: float
    exponent: float


class SegmentedContraction:
    """Ordered, append-only list of Gaussian primitives for one CGTO and one channel."""

    def __init__(self) -> None:
        self._primitives: list[GaussianPrimitive] = []

    def add(self, coefficient: float, exponent: float) -> "SegmentedContraction":
        """Append a primitive built from a coefficient/exponent pair.

        Returns:
            SegmentedContraction: self, for chaining.
        """
        return self.add_primitive(GaussianPrimitive(float(coefficient), float(exponent)))

    def add_primitive(self, primitive: GaussianPrimitive) -> "SegmentedContraction":
        """Append an existing primitive and return self."""
        self._primitives.append(primitive)
        return self

    def primitive_count(self) -> int:
        return len(self._primitives)

    def get(self, index: int) -> GaussianPrimitive | None:
        """Return the primitive at ``index``, or None when out of range."""
        if 0 <= index < len(self._primitives):
            return self._primitives[index]
        return None

    @property
    def coefficients(self) -> tuple[float, ...]:
        return tuple(p.coefficient for p in self._primitives)

    @property
    def exponents(self) -> tuple[float, ...]:
        return tuple(p.exponent for p in self._primitives)

    def __len__(self) -> int:
        return len(self._primitives)

    def __iter__(self) -> Iterator[GaussianPrimitive]:
        return iter(self._primitives)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SegmentedContraction):
            return NotImplemented
        return self._primitives == other._primitives

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n_primitives={len(self._primitives)})"
