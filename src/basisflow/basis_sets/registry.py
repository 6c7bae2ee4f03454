"""Central registry mapping basis set names to CustomBasisSet objects."""

from basisflow.basis_sets.custom_basis import CustomBasisSet
from basisflow.utils import logger

# Central storage: {basis_name_lower: CustomBasisSet}
_REGISTRY: dict[str, CustomBasisSet] = {}


def register_basis_set(basis_set_object: CustomBasisSet) -> None:
    """Registers a custom basis set object in the central store.

    Args:
        basis_set_object: The CustomBasisSet instance to register.

    Raises:
        ValueError: If the name (case-insensitive) is already registered.
        TypeError: If the provided object is not a CustomBasisSet instance.
    """
    if not isinstance(basis_set_object, CustomBasisSet):
        raise TypeError(f"Object to register must be an instance of CustomBasisSet, got {type(basis_set_object)}.")

    # Names are already lowercased in CustomBasisSet.__post_init__
    basis_key = basis_set_object.name
    if basis_key in _REGISTRY:
        raise ValueError(f"Basis set name '{basis_key}' is already registered.")

    _REGISTRY[basis_key] = basis_set_object
    logger.info(f"Registered CustomBasisSet: '{basis_key}'")


class BasisSetRegistry:
    """Read access to the registered basis sets."""

    def __getitem__(self, name: str) -> CustomBasisSet:
        """Retrieves the CustomBasisSet registered under ``name`` (case-insensitive).

        Raises:
            KeyError: If no basis set with that name is registered.
        """
        if name not in self:
            raise KeyError(f"Basis set '{name}' is not registered.")
        return _REGISTRY[name.lower()]

    def __contains__(self, name: str) -> bool:
        """Checks if a basis set name (case-insensitive) is registered."""
        return name.lower() in _REGISTRY

    def __len__(self) -> int:
        return len(_REGISTRY)

    @property
    def names(self) -> list[str]:
        """Sorted lowercase names of all registered basis sets."""
        return sorted(_REGISTRY)
