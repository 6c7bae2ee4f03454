from dataclasses import dataclass, field

from basisflow.basis_sets.atomic import AtomicBasisSet
from basisflow.exceptions import ValidationError
from basisflow.parsers.gaussian.core import parse_basis_set_text, read_basis_sets
from basisflow.parsers.gaussian.typing import AtomAssignment, ParserOptions
from basisflow.utils import logger
from basisflow.writers.gaussian import format_basis_set


@dataclass(frozen=True)
class CustomBasisSet:
    """A named basis set given as Gaussian94 text per element.

    Attributes:
        name: The common name for this basis set (e.g., "6-311G"). Stored and
              looked up case-insensitively (lowercase).
        definitions: A dictionary mapping element symbols to their Gaussian94
                     block (header line, shells, optional ``****``). Keys are
                     stored uppercase.
    """

    name: str
    definitions: dict[str, str] = field(repr=False)  # Avoid printing huge dicts

    def __post_init__(self) -> None:
        """Validate and normalize the fields."""
        if not self.name:
            raise ValidationError("CustomBasisSet name cannot be empty.")
        if not self.definitions:
            raise ValidationError(f"CustomBasisSet '{self.name}' must have definitions.")

        # Use object.__setattr__ because frozen=True
        object.__setattr__(self, "name", self.name.lower())
        object.__setattr__(self, "definitions", {k.upper(): v for k, v in self.definitions.items()})

        logger.debug(f"Initialized CustomBasisSet '{self.name}' with elements: {list(self.definitions.keys())}")

    @classmethod
    def from_gaussian_text(cls, name: str, text: str, options: ParserOptions | None = None) -> "CustomBasisSet":
        """Build a basis set from a multi-element Gaussian94 file body.

        Each block is parsed, then written back as that element's definition.

        Raises:
            ParsingError: If any block is malformed.
            ValidationError: If a block is declared for a particle index rather
                than an element, or an element appears twice.
            NotSupportedError: If a block holds a shell with an unsupported
                angular momentum letter, which cannot be written back.
        """
        definitions: dict[str, str] = {}
        for assignment, basis_set in read_basis_sets(text.splitlines(), options):
            if not isinstance(assignment, AtomAssignment):
                raise ValidationError(
                    f"CustomBasisSet '{name}' only accepts element blocks, got particle index {assignment.index}."
                )
            element = assignment.label.upper()
            if element in definitions:
                raise ValidationError(f"Element '{element}' defined twice in basis set '{name}'.")
            definitions[element] = format_basis_set(assignment, basis_set)
        return cls(name=name, definitions=definitions)

    def __getitem__(self, element: str) -> str:
        """Returns the basis set definition string for a specific element."""
        if element not in self:
            raise KeyError(f"Element '{element}' not found in basis set '{self.name}'.")
        return self.definitions[element.upper()]

    def __contains__(self, element: str) -> bool:
        """Checks if a definition exists for the given element."""
        return element.upper() in self.definitions

    def get_atomic_basis_set(self, element: str, options: ParserOptions | None = None) -> AtomicBasisSet:
        """Parse the definition for ``element`` into an AtomicBasisSet.

        A fresh object is built on every call.
        """
        assignment, basis_set = parse_basis_set_text(self[element], options)
        if not isinstance(assignment, AtomAssignment) or assignment.label.upper() != element.upper():
            logger.warning(
                f"Definition for '{element.upper()}' in basis set '{self.name}' is declared for {assignment}."
            )
        return basis_set

    @property
    def supported_elements(self) -> set[str]:
        """Returns a set of uppercase element symbols defined in this basis set."""
        return set(self.definitions.keys())
