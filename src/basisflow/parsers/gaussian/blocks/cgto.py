import re
from collections.abc import Sequence

from basisflow.basis_sets.angular_momentum import AngularMomentum
from basisflow.basis_sets.atomic import AtomicBasisSet
from basisflow.basis_sets.gaussian import SegmentedContraction
from basisflow.exceptions import (
    MalformedCgtoDeclarationError,
    MalformedPrimitiveLineError,
    MissingCgtoDeclarationError,
    MissingPrimitiveLineError,
)
from basisflow.parsers.gaussian.lines import SignificantLineReader
from basisflow.parsers.gaussian.typing import DEFAULT_OPTIONS, CgtoDeclaration, ParserOptions
from basisflow.utils import logger

PRIMITIVE_COUNT_PAT = re.compile(r"^[+-]?\d+$")
# Fortran double precision exponent marker, e.g. 0.4563240D+04
FORTRAN_EXPONENT_PAT = re.compile(r"(?<=[0-9.])[dD](?=[+-]?\d)")
# Plain decimal number with optional e/E/d/D exponent, or inf/nan. No digit separators.
FLOAT_PAT = re.compile(r"^[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eEdD][+-]?\d+)?|inf|infinity|nan)$", re.IGNORECASE)


def parse_cgto_declaration(line: str | None, line_number: int | None = None) -> CgtoDeclaration:
    """Parse a CGTO declaration such as ``SP   3   1.00``.

    Raises:
        MissingCgtoDeclarationError: If ``line`` is None.
        MalformedCgtoDeclarationError: If the momentum code or an integer
            primitive count is missing.
    """
    if line is None:
        raise MissingCgtoDeclarationError("Expecting CGTO declaration", line_number)

    tokens = line.split()
    if not tokens:
        raise MalformedCgtoDeclarationError(
            "Expecting angular momentum and number of Gaussian primitives", line_number
        )
    if len(tokens) < 2:
        raise MalformedCgtoDeclarationError(f"Bad CGTO declaration '{line.strip()}'", line_number)
    if not PRIMITIVE_COUNT_PAT.match(tokens[1]):
        raise MalformedCgtoDeclarationError(
            f"Bad CGTO declaration '{line.strip()}': primitive count '{tokens[1]}' is not an integer", line_number
        )
    return CgtoDeclaration(momentum_code=tokens[0], num_primitives=int(tokens[1]))


def _to_float(token: str) -> float:
    if not FLOAT_PAT.match(token):
        raise ValueError(f"could not convert string to float: '{token}'")
    return float(FORTRAN_EXPONENT_PAT.sub("e", token))


def parse_floats(line: str | None, line_number: int | None = None) -> list[float]:
    """Parse every whitespace-separated token of a primitive line as a float.

    Raises:
        MissingPrimitiveLineError: If ``line`` is None.
        MalformedPrimitiveLineError: If any token is not a number.
    """
    if line is None:
        raise MissingPrimitiveLineError("Expecting line of floats", line_number)
    try:
        return [_to_float(token) for token in line.split()]
    except ValueError as e:
        raise MalformedPrimitiveLineError(f"Bad primitive line '{line.strip()}': {e}", line_number) from e


def read_primitive_rows(
    reader: SignificantLineReader, declaration: CgtoDeclaration, options: ParserOptions = DEFAULT_OPTIONS
) -> list[list[float]]:
    """Read the ``num_primitives`` lines following a CGTO declaration.

    Each row must hold one coefficient column plus one exponent column per
    momentum letter. Extra columns are rejected unless ``strict_columns`` is off.
    """
    expected = 1 + len(declaration.momentum_code)
    rows: list[list[float]] = []
    for _ in range(declaration.num_primitives):
        line = reader.next_line()
        values = parse_floats(line, reader.line_number)
        if len(values) < expected or (options.strict_columns and len(values) != expected):
            raise MalformedPrimitiveLineError(
                f"Expected {expected} columns for '{declaration.momentum_code}' shell, "
                f"found {len(values)}: '{str(line).strip()}'",
                reader.line_number,
            )
        rows.append(values)
    return rows


def add_cgto(basis_set: AtomicBasisSet, momentum_code: str, rows: Sequence[Sequence[float]]) -> None:
    """Split a CGTO block into one segmented contraction per momentum letter.

    Column 0 is the coefficient shared by every letter; letter i takes its
    exponent from column i + 1.
    """
    for column, ch in enumerate(momentum_code, start=1):
        angular_momentum = AngularMomentum.from_char(ch)
        if angular_momentum is AngularMomentum.UNSUPPORTED:
            logger.warning(f"Unsupported angular momentum '{ch}' in shell '{momentum_code}'; tagged UNSUPPORTED.")
        contraction = SegmentedContraction()
        for row in rows:
            contraction.add(row[0], row[column])
        basis_set.add_segmented_contraction(angular_momentum, contraction)


def parse_cgto(
    reader: SignificantLineReader,
    declaration_line: str,
    basis_set: AtomicBasisSet,
    options: ParserOptions = DEFAULT_OPTIONS,
) -> None:
    """Parse one CGTO block whose declaration line was already read."""
    declaration = parse_cgto_declaration(declaration_line, reader.line_number)
    if declaration.num_primitives <= 0:
        logger.warning(
            f"CGTO '{declaration.momentum_code}' near line {reader.line_number} declares "
            f"{declaration.num_primitives} primitives; adding empty contractions."
        )
    rows = read_primitive_rows(reader, declaration, options)
    add_cgto(basis_set, declaration.momentum_code, rows)
    logger.debug(f"Parsed CGTO '{declaration.momentum_code}' with {len(rows)} primitives.")


class CgtoBlockParser:
    """Parses the CGTO blocks that follow a basis set header.

    Inside a block every significant line before the end marker opens a CGTO,
    so there is no line matching step: the caller hands each line to ``parse``.
    """

    def __init__(self, options: ParserOptions = DEFAULT_OPTIONS):
        self.options = options

    def parse(self, reader: SignificantLineReader, current_line: str, results: AtomicBasisSet) -> None:
        parse_cgto(reader, current_line, results, self.options)
