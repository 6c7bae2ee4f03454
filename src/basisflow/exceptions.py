class BasisflowError(Exception):
    """Base class for exceptions in the basisflow package."""

    pass


class NotSupportedError(BasisflowError):
    """Exception raised for features that are not supported."""

    pass


class ValidationError(BasisflowError):
    """Exception raised for errors during input validation."""

    pass


class ConfigurationError(BasisflowError):
    """Exception raised for configuration-related errors."""

    pass


class ParsingError(BasisflowError):
    """Exception raised for errors during basis set parsing.

    Attributes:
        line_number: 1-based number of the offending line in the line source,
                     or None when the error is not tied to a specific line.
    """

    def __init__(self, message: str, line_number: int | None = None):
        if line_number is not None:
            message = f"{message} (line {line_number})"
        super().__init__(message)
        self.line_number = line_number


class LineSourceError(ParsingError):
    """The underlying line source failed while being read."""

    pass


class MissingHeaderError(ParsingError):
    """No significant line was available for the atom/particle header."""

    pass


class MalformedHeaderError(ParsingError):
    """The header line has no atom label or particle index token."""

    pass


class MissingCgtoDeclarationError(ParsingError):
    """A CGTO declaration was expected but no significant line was available."""

    pass


class MalformedCgtoDeclarationError(ParsingError):
    """The CGTO declaration lacks a valid integer primitive count."""

    pass


class MissingPrimitiveLineError(ParsingError):
    """Fewer primitive lines were available than the CGTO declared."""

    pass


class MalformedPrimitiveLineError(ParsingError):
    """A primitive line has a non-numeric token or the wrong number of columns."""

    pass
