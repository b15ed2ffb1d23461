"""Custom exceptions for critpath."""


class CritpathError(Exception):
    """Base exception for all critpath errors."""

    pass


class ValidationError(CritpathError):
    """Raised when a mutation or input record is rejected."""

    pass


class DuplicateNameError(ValidationError):
    """Raised when a task name is already present in the graph."""

    pass


class NotFoundError(ValidationError):
    """Raised when a referenced task or dependency does not exist."""

    pass


class InvalidNameError(ValidationError):
    """Raised when a task name is empty or not a string."""

    pass


class InvalidDurationError(ValidationError):
    """Raised when a duration is not a non-negative whole number of days."""

    pass


class DependencyError(ValidationError):
    """Base for rejected dependency edges."""

    pass


class SelfDependencyError(DependencyError):
    """Raised when a task is made to depend on itself."""

    pass


class DuplicateEdgeError(DependencyError):
    """Raised when a dependency already exists."""

    pass


class CyclicDependencyError(DependencyError):
    """Raised when a dependency would close a cycle."""

    pass


class CyclicGraphError(CritpathError):
    """Raised when recompute finds a cycle that slipped past edge validation."""

    pass


class ParseError(CritpathError):
    """Raised when YAML parsing fails."""

    pass


class DateRangeError(CritpathError):
    """Raised when a computed date falls outside the supported calendar range."""

    pass
