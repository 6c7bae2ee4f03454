from basisflow.visualize.basis import plot_basis_set

__all__ = ["plot_basis_set"]
