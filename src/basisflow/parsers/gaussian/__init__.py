from basisflow.parsers.gaussian.core import parse_basis_set_text, read_basis_set, read_basis_sets
from basisflow.parsers.gaussian.typing import (
    AtomAssignment,
    BasisSetAssignment,
    LineSource,
    ParserOptions,
    ParticleIndexAssignment,
)

__all__ = [
    "read_basis_set",
    "read_basis_sets",
    "parse_basis_set_text",
    "AtomAssignment",
    "BasisSetAssignment",
    "LineSource",
    "ParserOptions",
    "ParticleIndexAssignment",
]
