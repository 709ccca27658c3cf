"""Capability tags for components and their dependency slots.

Two kinds of tag drive the container:

* component tags (``@component``, ``@service``, ``@repository``) mark a class
  as something the container should instantiate as a bean;
* the inject tag (``INJECT``) marks an annotated class attribute as a slot
  the container fills with a bean after construction.

Example:
    >>> @repository
    ... class UserRepository:
    ...     pass
    >>>
    >>> @service
    ... class UserService:
    ...     users: Annotated[UserRepository, INJECT]
"""

import inspect
import types
from typing import (
    Annotated,
    Any,
    Callable,
    Optional,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

from sprig.domain import DependencySlot
from sprig.errors import DependencyError

__all__ = [
    "Inject",
    "INJECT",
    "component",
    "service",
    "repository",
    "is_component",
    "is_inject",
    "component_metadata",
    "dependency_slots",
]

_METADATA_ATTRIBUTE = "__component_metadata__"

# typing.Optional[X] and X | None
_UNION_ORIGINS = (Union, getattr(types, "UnionType", Union))


class Inject:
    """Marker placed in ``Annotated`` metadata to declare a dependency slot."""

    def __repr__(self) -> str:
        return "INJECT"


INJECT = Inject()


def set_metadata(cls: type, **kwargs) -> type:
    metadata = dict(vars(cls).get(_METADATA_ATTRIBUTE, {}))
    metadata.update(kwargs)
    setattr(cls, _METADATA_ATTRIBUTE, metadata)
    return cls


def _stereotype(name: str) -> Callable:
    def decorator(target: Optional[type] = None) -> Any:
        def tag(cls: type) -> type:
            if not inspect.isclass(cls):
                raise DependencyError(f"@{name} can only decorate a class, not {cls!r}")
            return set_metadata(cls, stereotype=name)

        # Support both @service and @service()
        if target is None:
            return tag
        return tag(target)

    decorator.__name__ = name
    decorator.__doc__ = f"Tag a class as a {name} to be registered as a bean."
    return decorator


component = _stereotype("component")
service = _stereotype("service")
repository = _stereotype("repository")


def component_metadata(cls: type) -> dict[str, Any]:
    """Return the metadata recorded by a component tag on ``cls`` itself."""
    return dict(vars(cls).get(_METADATA_ATTRIBUTE, {}))


def is_component(cls: Any) -> bool:
    """True if ``cls`` is a class tagged directly with a component tag.

    Tags are not inherited: a subclass of a service is not a service until
    it is tagged itself.
    """
    return inspect.isclass(cls) and _METADATA_ATTRIBUTE in vars(cls)


def is_inject(marker: Any) -> bool:
    return isinstance(marker, Inject)


def dependency_slots(
    cls: type, is_inject: Callable[[Any], bool] = is_inject
) -> list[DependencySlot]:
    """Extract the dependency slots declared on a class.

    A slot is a class annotation of the form ``Annotated[T, INJECT]``.
    Annotations inherited from base classes are included, and ``Optional[T]``
    is treated as ``T``.

    Args:
        cls: The component type to inspect.
        is_inject: Predicate identifying the inject tag among ``Annotated``
            metadata.

    Returns:
        The slots in annotation order.

    Raises:
        DependencyError: If an annotation cannot be evaluated, or a slot's
            declared type is not a class.

    Example:
        >>> class Service:
        ...     repo: Annotated[Repository, INJECT]
        ...     name: str
        >>> dependency_slots(Service)
        [DependencySlot(owner=Service, name='repo', declared_type=Repository)]
    """
    try:
        hints = get_type_hints(cls, include_extras=True)
    except Exception as e:
        raise DependencyError(
            f"Cannot evaluate annotations of {cls.__qualname__}: {e}"
        ) from e

    return [
        _make_slot(cls, name, annotation)
        for name, annotation in hints.items()
        if _is_slot_annotation(annotation, is_inject)
    ]


def _is_slot_annotation(annotation, is_inject) -> bool:
    if get_origin(annotation) is not Annotated:
        return False
    _, *metadata = get_args(annotation)
    return any(is_inject(m) for m in metadata)


def _make_slot(owner: type, name: str, annotation) -> DependencySlot:
    declared_type = _unwrap_optional(get_args(annotation)[0])
    if not inspect.isclass(declared_type):
        raise DependencyError(
            f"Dependency slot {owner.__qualname__}.{name} must be annotated "
            f"with a class, not {declared_type!r}"
        )
    return DependencySlot(owner, name, declared_type)


def _unwrap_optional(annotation):
    if get_origin(annotation) in _UNION_ORIGINS:
        non_none = [t for t in get_args(annotation) if t is not type(None)]
        if len(non_none) == 1:
            return non_none[0]
    return annotation
