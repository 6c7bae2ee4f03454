from basisflow.basis_sets.angular_momentum import AngularMomentum
from basisflow.basis_sets.atomic import AtomicBasisSet
from basisflow.exceptions import NotSupportedError
from basisflow.parsers.gaussian.typing import AtomAssignment, BasisSetAssignment, ParticleIndexAssignment
from basisflow.utils import logger

END_MARKER = "****"
SCALE_FACTOR = "1.00"


def format_assignment(assignment: BasisSetAssignment) -> str:
    """Format the header line of a basis set block, e.g. ``C     0``."""
    if isinstance(assignment, AtomAssignment):
        target = assignment.label
    elif isinstance(assignment, ParticleIndexAssignment):
        target = str(assignment.index)
    else:
        raise NotSupportedError(f"Unsupported basis set assignment type: {type(assignment)}")
    return f"{target:<5} 0"


def format_basis_set(assignment: BasisSetAssignment, basis_set: AtomicBasisSet) -> str:
    """Write one basis set block in Gaussian94 format.

    Every contraction becomes its own single-letter shell, in iteration order;
    multi-letter shells such as SP are not merged back. Values are written with
    ``repr`` so they parse back to the same floats.

    Args:
        assignment: Atom label or particle index for the header line.
        basis_set: The basis set to write.

    Returns:
        The block text, terminated by ``****`` and a newline.

    Raises:
        NotSupportedError: If a contraction is tagged UNSUPPORTED, since it has
            no letter to write.
    """
    lines = [format_assignment(assignment)]
    for angular_momentum, contraction in basis_set:
        if angular_momentum is AngularMomentum.UNSUPPORTED:
            raise NotSupportedError("Cannot write a contraction with unsupported angular momentum.")
        lines.append(f"{angular_momentum.letter:<4} {contraction.primitive_count():<3} {SCALE_FACTOR}")
        for primitive in contraction:
            lines.append(f"{primitive.coefficient!r:>24} {primitive.exponent!r:>24}")
    lines.append(END_MARKER)
    logger.debug(f"Formatted basis set for {assignment} ({len(lines)} lines).")
    return "\n".join(lines) + "\n"
