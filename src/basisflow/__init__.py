from basisflow.basis_sets import AngularMomentum, AtomicBasisSet, GaussianPrimitive, SegmentedContraction
from basisflow.parsers.gaussian import (
    AtomAssignment,
    ParserOptions,
    ParticleIndexAssignment,
    parse_basis_set_text,
    read_basis_set,
    read_basis_sets,
)
from basisflow.writers import format_basis_set

__all__ = [
    "AngularMomentum",
    "AtomicBasisSet",
    "GaussianPrimitive",
    "SegmentedContraction",
    "AtomAssignment",
    "ParticleIndexAssignment",
    "ParserOptions",
    "read_basis_set",
    "read_basis_sets",
    "parse_basis_set_text",
    "format_basis_set",
]
