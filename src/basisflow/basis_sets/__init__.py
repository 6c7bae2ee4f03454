"""Data model for atomic Gaussian basis sets.

CustomBasisSet and the registry live in ``basisflow.basis_sets.custom_basis``
and ``basisflow.basis_sets.registry``; they depend on the parser and are not
imported here.
"""

from basisflow.basis_sets.angular_momentum import AngularMomentum
from basisflow.basis_sets.atomic import AtomicBasisSet
from basisflow.basis_sets.gaussian import GaussianPrimitive, SegmentedContraction

__all__ = ["AngularMomentum", "AtomicBasisSet", "GaussianPrimitive", "SegmentedContraction"]
