from basisflow.writers.gaussian import format_assignment, format_basis_set

__all__ = ["format_assignment", "format_basis_set"]
