import re

from basisflow.exceptions import MalformedHeaderError, MissingHeaderError
from basisflow.parsers.gaussian.typing import AtomAssignment, BasisSetAssignment, ParticleIndexAssignment
from basisflow.utils import logger

# Signed decimal integer, e.g. "1", "-2", "+3". Anything else is an atom label.
PARTICLE_INDEX_PAT = re.compile(r"^[+-]?\d+$")
# Particle indices are signed 32-bit; a larger integer is kept as an atom label.
MIN_PARTICLE_INDEX = -(2**31)
MAX_PARTICLE_INDEX = 2**31 - 1


def parse_header_line(line: str | None, line_number: int | None = None) -> BasisSetAssignment:
    """Parse the first line of a basis set block into its assignment target.

    The first whitespace-separated token decides the target: an integer that
    fits in a signed 32-bit range is a 0-based particle index, anything else
    is an atom label kept verbatim.
    The remaining tokens (usually a trailing ``0``) are ignored.

    Args:
        line: The header line, or None if no significant line was available.
        line_number: Line number used in error messages.

    Returns:
        AtomAssignment or ParticleIndexAssignment.

    Raises:
        MissingHeaderError: If ``line`` is None.
        MalformedHeaderError: If the line holds no token.
    """
    if line is None:
        raise MissingHeaderError("Bad basis set: expected an atom/particle header line", line_number)

    tokens = line.split()
    if not tokens:
        raise MalformedHeaderError("Expect atom/particle index in basis set header", line_number)

    value = tokens[0]
    if PARTICLE_INDEX_PAT.match(value) and MIN_PARTICLE_INDEX <= int(value) <= MAX_PARTICLE_INDEX:
        assignment: BasisSetAssignment = ParticleIndexAssignment(index=int(value))
    else:
        assignment = AtomAssignment(label=value)
    logger.debug(f"Parsed basis set header: {assignment}")
    return assignment
