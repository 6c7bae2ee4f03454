from basisflow.parsers.gaussian.blocks.cgto import (
    CgtoBlockParser,
    add_cgto,
    parse_cgto,
    parse_cgto_declaration,
    parse_floats,
    read_primitive_rows,
)
from basisflow.parsers.gaussian.blocks.header import parse_header_line

__all__ = [
    "CgtoBlockParser",
    "add_cgto",
    "parse_cgto",
    "parse_cgto_declaration",
    "parse_floats",
    "parse_header_line",
    "read_primitive_rows",
]
