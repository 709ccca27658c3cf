"""Exceptions raised by the container.

Every error derives from :class:`DependencyError`, so callers that only care
whether bootstrapping worked can catch a single type.
"""

__all__ = [
    "DependencyError",
    "ConstructionError",
    "BeanNotFoundError",
    "AmbiguousBeanError",
    "ContainerStateError",
]


class DependencyError(Exception):
    """Raised when a component cannot be built, wired or looked up."""

    pass


class ConstructionError(DependencyError):
    """Raised when a component type cannot be instantiated with no arguments.

    Attributes:
        component_type: The type that failed to construct.
    """

    def __init__(self, component_type: type, message: str):
        super().__init__(message)
        self.component_type = component_type


class BeanNotFoundError(DependencyError, LookupError):
    """Raised when no bean compatible with the requested type is registered."""

    def __init__(self, requested_type: type):
        super().__init__(f"No bean registered for type {_type_name(requested_type)}")
        self.requested_type = requested_type


class AmbiguousBeanError(DependencyError):
    """Raised when several beans match a type and the policy forbids choosing."""

    def __init__(self, requested_type: type, candidates: list):
        names = [type(candidate).__name__ for candidate in candidates]
        super().__init__(
            f"No unique bean found for type {_type_name(requested_type)}: "
            f"candidates {names}"
        )
        self.requested_type = requested_type
        self.candidates = candidates


class ContainerStateError(DependencyError):
    """Raised when an operation is not allowed in the container's current state."""

    pass


def _type_name(t) -> str:
    return getattr(t, "__qualname__", repr(t))
