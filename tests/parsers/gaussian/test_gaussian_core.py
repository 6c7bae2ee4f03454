import io
import logging
from collections.abc import Iterator

import pytest

from basisflow.basis_sets.angular_momentum import AngularMomentum
from basisflow.exceptions import (
    LineSourceError,
    MalformedCgtoDeclarationError,
    MalformedPrimitiveLineError,
    MissingHeaderError,
    MissingPrimitiveLineError,
    ParsingError,
)
from basisflow.parsers.gaussian import (
    AtomAssignment,
    ParserOptions,
    ParticleIndexAssignment,
    parse_basis_set_text,
    read_basis_set,
    read_basis_sets,
)

# === Carbon 6-311G (end-to-end) ===


def test_carbon_assignment_and_counts(carbon_lines: list[str]) -> None:
    assignment, basis_set = read_basis_set(carbon_lines)
    assert assignment == AtomAssignment("C")
    assert basis_set.num_contracted_functions() == 7
    assert basis_set.num_gaussian_primitives() == 16
    assert basis_set.highest_angular_momentum() is AngularMomentum.P


def test_carbon_first_contraction(carbon_lines: list[str]) -> None:
    _, basis_set = read_basis_set(carbon_lines)
    angular_momentum, contraction = next(iter(basis_set))
    assert angular_momentum is AngularMomentum.S
    assert contraction.primitive_count() == 6
    assert contraction.get(2).coefficient == pytest.approx(154.9730)
    assert contraction.get(3).exponent == pytest.approx(0.2608010)


def test_carbon_iteration_order(carbon_lines: list[str]) -> None:
    _, basis_set = read_basis_set(carbon_lines)
    layout = [(am, c.primitive_count()) for am, c in basis_set]
    assert layout == [
        (AngularMomentum.S, 6),
        (AngularMomentum.S, 3),
        (AngularMomentum.S, 1),
        (AngularMomentum.S, 1),
        (AngularMomentum.P, 3),
        (AngularMomentum.P, 1),
        (AngularMomentum.P, 1),
    ]


def test_carbon_sp_values(carbon_lines: list[str]) -> None:
    _, basis_set = read_basis_set(carbon_lines)
    contractions = list(basis_set)

    s_from_second_sp = contractions[2][1]
    assert s_from_second_sp.get(0).coefficient == pytest.approx(0.4834560)
    assert s_from_second_sp.get(0).exponent == pytest.approx(1.0)

    p_from_first_sp = contractions[4][1]
    assert p_from_first_sp.get(2).coefficient == pytest.approx(1.459330)
    assert p_from_first_sp.get(2).exponent == pytest.approx(0.815854)

    s_from_first_sp = contractions[1][1]
    assert s_from_first_sp.exponents == pytest.approx((0.114660, 0.919999, -0.00303068))


def test_carbon_from_file_object(carbon_lines: list[str]) -> None:
    assignment, basis_set = read_basis_set(io.StringIO("".join(carbon_lines)))
    assert assignment == AtomAssignment("C")
    assert basis_set.num_gaussian_primitives() == 16


def test_each_parse_returns_fresh_basis_set(carbon_lines: list[str]) -> None:
    _, first = read_basis_set(carbon_lines)
    _, second = read_basis_set(carbon_lines)
    assert first is not second
    assert list(first) == list(second)


def test_logs_completion(carbon_lines: list[str], caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="basisflow"):
        read_basis_set(carbon_lines)
    assert "7 contracted functions, 16 primitives" in caplog.text


# === Headers ===


def test_particle_index_header() -> None:
    assignment, basis_set = read_basis_set(["1 0", "S 1 1.00", "0.5 1.0", "****"])
    assert assignment == ParticleIndexAssignment(1)
    assert basis_set.num_contracted_functions() == 1


def test_header_only_block_is_empty() -> None:
    assignment, basis_set = read_basis_set(["H 0", "****"])
    assert assignment == AtomAssignment("H")
    assert basis_set.num_contracted_functions() == 0
    assert basis_set.highest_angular_momentum() is AngularMomentum.UNSUPPORTED


def test_block_without_end_marker() -> None:
    _, basis_set = read_basis_set(["H 0", "S 1 1.00", "0.5 1.0"])
    assert basis_set.num_gaussian_primitives() == 1


def test_lines_after_end_marker_are_not_read() -> None:
    def source() -> Iterator[str]:
        yield from ["H 0", "S 1 1.00", "0.5 1.0", "****"]
        raise AssertionError("read past end marker")

    _, basis_set = read_basis_set(source())
    assert basis_set.num_contracted_functions() == 1


# === Failures ===


def test_only_comments_before_end_marker() -> None:
    with pytest.raises(MissingHeaderError):
        read_basis_set(["! comment", "", "   ", "! another", "****", "C 0"])


def test_empty_source() -> None:
    with pytest.raises(MissingHeaderError):
        read_basis_set([])


def test_non_numeric_primitive_fails_whole_parse(caplog: pytest.LogCaptureFixture) -> None:
    lines = ["C 0", "S 2 1.00", "1.0 2.0", "1.0 oops", "****"]
    with pytest.raises(MalformedPrimitiveLineError, match=r"line 4"):
        read_basis_set(lines)
    assert "Failed to parse basis set" in caplog.text


def test_underscore_digits_in_primitive_fail_parse() -> None:
    with pytest.raises(MalformedPrimitiveLineError, match="Bad primitive line '1_0 2.0'") as exc_info:
        read_basis_set(["C 0", "S 1 1.00", "1_0 2.0", "****"])
    assert exc_info.value.line_number == 3


def test_too_few_primitive_lines() -> None:
    with pytest.raises(MissingPrimitiveLineError):
        read_basis_set(["C 0", "S 3 1.00", "1.0 2.0", "3.0 4.0", "****"])


def test_bad_declaration() -> None:
    with pytest.raises(MalformedCgtoDeclarationError):
        read_basis_set(["C 0", "S", "1.0 2.0", "****"])


def test_primitive_line_mistaken_for_declaration() -> None:
    # One line too many under the S shell: "3.0 4.0" is read as a declaration
    with pytest.raises(MalformedCgtoDeclarationError):
        read_basis_set(["C 0", "S 1 1.00", "1.0 2.0", "3.0 4.0", "****"])


def test_sp_line_with_missing_column() -> None:
    with pytest.raises(MalformedPrimitiveLineError, match="Expected 3 columns"):
        read_basis_set(["C 0", "SP 1 1.00", "1.0 2.0", "****"])


def test_extra_columns_allowed_when_lenient() -> None:
    options = ParserOptions().set_strict_columns(False)
    _, basis_set = read_basis_set(["C 0", "S 1 1.00", "1.0 2.0 99.0", "****"], options)
    assert basis_set.contractions(AngularMomentum.S)[0].exponents == (2.0,)


def test_line_source_failure() -> None:
    def source() -> Iterator[str]:
        yield "C 0"
        yield "S 1 1.00"
        raise OSError("connection reset")

    with pytest.raises(LineSourceError) as exc_info:
        read_basis_set(source())
    assert isinstance(exc_info.value.__cause__, OSError)
    assert isinstance(exc_info.value, ParsingError)


def test_line_source_failure_logged_once(caplog: pytest.LogCaptureFixture) -> None:
    def source() -> Iterator[str]:
        yield "C 0"
        raise OSError("connection reset")

    with pytest.raises(LineSourceError):
        read_basis_set(source())
    errors = [record for record in caplog.records if record.levelno == logging.ERROR]
    assert len(errors) == 1
    assert "connection reset" in errors[0].getMessage()


# === Multiple blocks ===


def test_read_basis_sets_multiple_blocks(sto3g_lines: list[str]) -> None:
    blocks = read_basis_sets(sto3g_lines)
    assert [assignment for assignment, _ in blocks] == [AtomAssignment("H"), AtomAssignment("O")]

    hydrogen, oxygen = blocks[0][1], blocks[1][1]
    assert hydrogen.num_contracted_functions() == 1
    assert oxygen.num_contracted_functions() == 3
    assert oxygen.num_gaussian_primitives() == 9
    first_o = oxygen.contractions(AngularMomentum.S)[0]
    assert first_o.get(0).coefficient == pytest.approx(130.7093214)
    p_shell = oxygen.contractions(AngularMomentum.P)[0]
    assert p_shell.get(2).exponent == pytest.approx(0.3919573931)


def test_read_basis_sets_empty_source() -> None:
    assert read_basis_sets(["! nothing here", ""]) == []


def test_read_basis_sets_propagates_errors() -> None:
    with pytest.raises(MalformedPrimitiveLineError):
        read_basis_sets(["H 0", "S 1 1.00", "0.5 1.0", "****", "He 0", "S 1 1.00", "x y", "****"])


def test_parse_basis_set_text_reads_first_block() -> None:
    text = "H 0\nS 1 1.00\n0.5 1.0\n****\nHe 0\nS 1 1.00\n0.7 1.0\n****\n"
    assignment, basis_set = parse_basis_set_text(text)
    assert assignment == AtomAssignment("H")
    assert basis_set.contractions(AngularMomentum.S)[0].coefficients == (0.5,)
