"""Domain models used throughout the container."""

from dataclasses import dataclass, field
from typing import Any, TYPE_CHECKING

from sprig.errors import ConstructionError

if TYPE_CHECKING:
    from sprig.registry import BeanRegistry

__all__ = ["DependencySlot", "UnfilledSlot", "ConstructionFailure", "BuildResult"]


@dataclass(frozen=True)
class DependencySlot:
    """An attribute on a component type that the wirer fills with a bean.

    Attributes:
        owner: The component type declaring the slot.
        name: The attribute name the bean is assigned to.
        declared_type: The type a bean must be an instance of to fill the slot.
    """

    owner: type
    name: str
    declared_type: type

    def value_of(self, bean: Any) -> Any:
        """Return the slot's current value on ``bean``, or None if it is empty."""
        return getattr(bean, self.name, None)


@dataclass(frozen=True)
class UnfilledSlot:
    """A slot that no registered bean could satisfy."""

    bean: Any
    slot: DependencySlot

    def __str__(self) -> str:
        return (
            f"{self.slot.owner.__qualname__}.{self.slot.name} "
            f"({self.slot.declared_type.__qualname__})"
        )


@dataclass(frozen=True)
class ConstructionFailure:
    """A component type that could not be instantiated during a build."""

    component_type: type
    error: ConstructionError


@dataclass(frozen=True)
class BuildResult:
    """
    Outcome of a container build.

    A build never stops at the first broken component: every type that
    constructs successfully is registered and wired, and the rest are
    reported here so that callers can decide whether a partial bootstrap
    is acceptable.

    Attributes:
        registry: The frozen registry of beans.
        failures: Types that failed to construct, in build order.
        unfilled: Slots left empty because no compatible bean exists.
        skipped: Types passed to the build that carry no component tag.
    """

    registry: "BeanRegistry"
    failures: list[ConstructionFailure] = field(default_factory=list)
    unfilled: list[UnfilledSlot] = field(default_factory=list)
    skipped: list[type] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def failed_types(self) -> list[type]:
        return [failure.component_type for failure in self.failures]

    def raise_for_failures(self) -> None:
        """Raise the first construction error recorded by the build, if any.

        Raises:
            ConstructionError: If any component type failed to construct.
        """
        if self.failures:
            raise self.failures[0].error
