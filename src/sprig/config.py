"""Container configuration.

Configuration is supplied in code when the container is created; there are
no configuration files or environment variables.
"""

from dataclasses import dataclass
from typing import Any, Callable

from sprig.discovery import discover_types_in_namespace
from sprig.markers import is_component, is_inject
from sprig.registry import AmbiguityPolicy

__all__ = ["ContainerOptions"]


@dataclass(frozen=True)
class ContainerOptions:
    """Options controlling how a :class:`~sprig.container.Container` builds.

    Attributes:
        ambiguity: What to do when several beans match a slot or lookup.
        is_component: Predicate selecting the types to register as beans.
        is_inject: Predicate identifying the inject tag in ``Annotated`` metadata.
        discover: Function listing candidate types in a package.
        fail_on_construction_error: If True, the first construction error is
            raised from ``build`` instead of being collected in the result.
    """

    ambiguity: AmbiguityPolicy = AmbiguityPolicy.FIRST_REGISTERED
    is_component: Callable[[type], bool] = is_component
    is_inject: Callable[[Any], bool] = is_inject
    discover: Callable[[str], list[type]] = discover_types_in_namespace
    fail_on_construction_error: bool = False
