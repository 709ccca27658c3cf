"""Sprig dependency injection container.

Sprig is a minimal dependency-injection container modelled on Spring's
annotation-driven bean factory. Tagged classes are instantiated once, with
their no-argument constructor, into a registry of singleton beans; then every
attribute annotated with the inject tag is filled with a type-compatible bean
from that registry.

Key Features:
    - Component discovery by tag, from an explicit list of types or a package
    - One bean per type, identified by object identity
    - Two-phase build (instantiate all, then wire all), so mutual references
      resolve without ordering
    - Deterministic choice between several compatible beans, or fail-fast
    - Construction failures reported in the build result, not swallowed

Basic Usage:
    >>> from typing import Annotated
    >>> from sprig import INJECT, make_container, repository, service
    >>>
    >>> @repository
    ... class UserRepository:
    ...     pass
    >>>
    >>> @service
    ... class UserService:
    ...     users: Annotated[UserRepository, INJECT]
    >>>
    >>> container = make_container([UserRepository, UserService])
    >>> container[UserService].users is container[UserRepository]
    True

The package consists of:
    - markers: component tags, the inject tag and slot introspection
    - registry: the bean registry and ambiguity policy
    - factory: no-argument construction of beans
    - wiring: filling dependency slots
    - discovery: listing the classes of a package
    - container: the container facade
    - builders: high-level construction functions
    - errors: container exceptions
"""

from sprig.builders import container_for_package, make_container
from sprig.config import ContainerOptions
from sprig.container import Container, ContainerState
from sprig.discovery import discover_types_in_namespace
from sprig.domain import BuildResult, ConstructionFailure, DependencySlot, UnfilledSlot
from sprig.errors import (
    AmbiguousBeanError,
    BeanNotFoundError,
    ConstructionError,
    ContainerStateError,
    DependencyError,
)
from sprig.markers import (
    INJECT,
    Inject,
    component,
    dependency_slots,
    is_component,
    repository,
    service,
)
from sprig.registry import AmbiguityPolicy, BeanRegistry

__all__ = [
    "AmbiguityPolicy",
    "AmbiguousBeanError",
    "BeanNotFoundError",
    "BeanRegistry",
    "BuildResult",
    "ConstructionError",
    "ConstructionFailure",
    "Container",
    "ContainerOptions",
    "ContainerState",
    "ContainerStateError",
    "DependencyError",
    "DependencySlot",
    "INJECT",
    "Inject",
    "UnfilledSlot",
    "component",
    "container_for_package",
    "dependency_slots",
    "discover_types_in_namespace",
    "is_component",
    "make_container",
    "repository",
    "service",
]
