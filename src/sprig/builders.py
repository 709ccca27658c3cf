"""High level entry points for constructing containers."""

from typing import Iterable, Optional

from sprig.config import ContainerOptions
from sprig.container import Container

__all__ = ["make_container", "container_for_package"]


def make_container(
    component_types: Iterable[type],
    options: Optional[ContainerOptions] = None,
    require_complete: bool = False,
) -> Container:
    """Construct and return a built :class:`Container`.

    Args:
        component_types: Candidate types; only those carrying a component tag
            are registered.
        options: Optional container configuration.
        require_complete: If True, raise the first construction error instead
            of returning a container that lacks the beans that failed.

    Returns:
        The built container.

    Raises:
        ConstructionError: If ``require_complete`` is set and a component
            type fails to construct.

    Example:
        >>> container = make_container([UserRepository, UserService])
        >>> container[UserService].users
    """
    container = Container(options)
    result = container.build(component_types)
    if require_complete:
        result.raise_for_failures()
    return container


def container_for_package(
    package_name: str,
    options: Optional[ContainerOptions] = None,
    require_complete: bool = False,
) -> Container:
    """Construct a built :class:`Container` from the tagged classes of a package.

    Every module under ``package_name`` is imported; the classes tagged with
    ``@component``, ``@service`` or ``@repository`` become beans.

    Raises:
        ImportError: If the package cannot be imported.
        ConstructionError: If ``require_complete`` is set and a component
            type fails to construct.
    """
    container = Container(options)
    result = container.build_package(package_name)
    if require_complete:
        result.raise_for_failures()
    return container
