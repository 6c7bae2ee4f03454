from basisflow.basis_sets.atomic import AtomicBasisSet
from basisflow.exceptions import ParsingError
from basisflow.parsers.gaussian.blocks import CgtoBlockParser, parse_header_line
from basisflow.parsers.gaussian.lines import SignificantLineReader
from basisflow.parsers.gaussian.typing import DEFAULT_OPTIONS, BasisSetAssignment, LineSource, ParserOptions
from basisflow.utils import logger


def _read_block(
    reader: SignificantLineReader, header_line: str | None, options: ParserOptions
) -> tuple[BasisSetAssignment, AtomicBasisSet]:
    """Parse one basis set block whose header line was already read."""
    assignment = parse_header_line(header_line, reader.line_number)
    basis_set = AtomicBasisSet()
    cgto_parser = CgtoBlockParser(options)

    line = reader.next_line()
    while line is not None:
        cgto_parser.parse(reader, line, basis_set)
        line = reader.next_line()

    logger.info(
        f"Parsed basis set for {assignment}: {basis_set.num_contracted_functions()} contracted functions, "
        f"{basis_set.num_gaussian_primitives()} primitives."
    )
    return assignment, basis_set


def read_basis_set(
    lines: LineSource, options: ParserOptions | None = None
) -> tuple[BasisSetAssignment, AtomicBasisSet]:
    """Read a single Gaussian-format basis set block from a line source.

    Blank and ``!`` comment lines are skipped anywhere. The block ends at a
    ``****`` line or at the end of the source; lines after the marker are
    left unread.

    Args:
        lines: Iterable of text lines (open file, list, ``str.splitlines()``...).
        options: Parser options; defaults to strict column checking.

    Returns:
        The assignment target and a freshly built AtomicBasisSet.

    Raises:
        ParsingError: A subclass describing the first problem found. Nothing
            partial is returned.
    """
    options = options or DEFAULT_OPTIONS
    reader = SignificantLineReader(lines, options)
    try:
        return _read_block(reader, reader.next_line(), options)
    except ParsingError as e:
        logger.error(f"Failed to parse basis set: {e}")
        raise


def read_basis_sets(
    lines: LineSource, options: ParserOptions | None = None
) -> list[tuple[BasisSetAssignment, AtomicBasisSet]]:
    """Read every basis set block of a Gaussian94 file until the source is exhausted.

    Raises:
        ParsingError: On the first malformed block; earlier blocks are discarded.
    """
    options = options or DEFAULT_OPTIONS
    reader = SignificantLineReader(lines, options)
    results: list[tuple[BasisSetAssignment, AtomicBasisSet]] = []
    try:
        while True:
            header_line = reader.next_line()
            if header_line is None:
                if reader.exhausted:
                    break
                logger.debug(f"Skipping end marker without a block at line {reader.line_number}.")
                continue
            results.append(_read_block(reader, header_line, options))
    except ParsingError as e:
        logger.error(f"Failed to parse basis set file after {len(results)} block(s): {e}")
        raise

    logger.info(f"Parsed {len(results)} basis set block(s).")
    return results


def parse_basis_set_text(text: str, options: ParserOptions | None = None) -> tuple[BasisSetAssignment, AtomicBasisSet]:
    """Parse the first basis set block of an in-memory string."""
    return read_basis_set(text.splitlines(), options)
