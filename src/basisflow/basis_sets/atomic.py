from collections.abc import Iterator

from basisflow.basis_sets.angular_momentum import AngularMomentum
from basisflow.basis_sets.gaussian import SegmentedContraction


class AtomicBasisSet:
    """Contracted Gaussian functions of one atom, grouped by angular momentum.

    Storage is a dense list of slots indexed by the momentum quantum number.
    Adding a contraction at level l creates empty slots for every lower level
    that does not exist yet, so ``_slots[l]`` is always valid for l below the
    slot count. Contractions tagged UNSUPPORTED have no slot index and are
    kept in their own list.

    Iteration yields ``(AngularMomentum, SegmentedContraction)`` pairs in
    ascending momentum order (UNSUPPORTED first), and in insertion order within
    one level. Iterating does not mutate the set and may be repeated.
    """

    def __init__(self) -> None:
        self._slots: list[list[SegmentedContraction]] = []
        self._unsupported: list[SegmentedContraction] = []

    def add_segmented_contraction(
        self, angular_momentum: AngularMomentum, segmented_contraction: SegmentedContraction
    ) -> "AtomicBasisSet":
        """Append a contraction under ``angular_momentum`` and return self."""
        if angular_momentum is AngularMomentum.UNSUPPORTED:
            self._unsupported.append(segmented_contraction)
            return self

        index = int(angular_momentum)
        while len(self._slots) <= index:
            self._slots.append([])
        self._slots[index].append(segmented_contraction)
        return self

    def num_contracted_functions(self) -> int:
        return len(self._unsupported) + sum(len(slot) for slot in self._slots)

    def num_gaussian_primitives(self) -> int:
        return sum(contraction.primitive_count() for _, contraction in self)

    def highest_angular_momentum(self) -> AngularMomentum:
        """Momentum of the highest slot, UNSUPPORTED when there are no slots.

        This reports the highest slot index, not the highest level holding a
        contraction; the two differ only for slots created as padding.
        """
        if not self._slots:
            return AngularMomentum.UNSUPPORTED
        return AngularMomentum.from_index(len(self._slots) - 1)

    def contractions(self, angular_momentum: AngularMomentum) -> tuple[SegmentedContraction, ...]:
        """Contractions stored under one momentum level, in insertion order."""
        if angular_momentum is AngularMomentum.UNSUPPORTED:
            return tuple(self._unsupported)
        index = int(angular_momentum)
        if index >= len(self._slots):
            return ()
        return tuple(self._slots[index])

    def __iter__(self) -> Iterator[tuple[AngularMomentum, SegmentedContraction]]:
        for contraction in self._unsupported:
            yield AngularMomentum.UNSUPPORTED, contraction
        for index, slot in enumerate(self._slots):
            angular_momentum = AngularMomentum.from_index(index)
            for contraction in slot:
                yield angular_momentum, contraction

    def __len__(self) -> int:
        return self.num_contracted_functions()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(n_contracted={self.num_contracted_functions()}, "
            f"n_primitives={self.num_gaussian_primitives()}, "
            f"highest_l={self.highest_angular_momentum().name})"
        )
