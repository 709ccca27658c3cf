"""
The container facade: build beans from component types and look them up.

A container is built exactly once. Building runs three steps in a single
blocking call:

1. filter the candidate types by component tag;
2. instantiate every tagged type into a :class:`~sprig.registry.BeanRegistry`;
3. wire the dependency slots of every bean from that registry.

After the build the registry is frozen and the container only answers lookups.
"""

from enum import Enum
from typing import Any, Iterable, Optional, TypeVar

from loguru import logger

from sprig.config import ContainerOptions
from sprig.domain import BuildResult
from sprig.errors import ContainerStateError
from sprig.factory import InstanceFactory
from sprig.registry import BeanRegistry
from sprig.wiring import DependencyWirer

__all__ = ["Container", "ContainerState"]

T = TypeVar("T")


class ContainerState(Enum):
    UNBUILT = "unbuilt"
    BUILT = "built"


class Container:
    """
    A dependency-injection container holding one bean per component type.

    Example:
        >>> container = Container()
        >>> result = container.build([UserRepository, UserService])
        >>> service = container.get_bean(UserService)
        >>> service.users is container.get_bean(UserRepository)
        True
    """

    def __init__(self, options: Optional[ContainerOptions] = None):
        self.options = options or ContainerOptions()
        self._registry = BeanRegistry(self.options.ambiguity)
        self._factory = InstanceFactory()
        self._wirer = DependencyWirer(self.options.is_inject)
        self._state = ContainerState.UNBUILT

    @property
    def state(self) -> ContainerState:
        return self._state

    @property
    def registry(self) -> BeanRegistry:
        return self._registry

    def build(self, component_types: Iterable[type]) -> BuildResult:
        """Instantiate and wire every tagged type in ``component_types``.

        Types are registered in iteration order, which decides which bean wins
        when several match a slot. A set of types is sorted by module and
        qualified name first so that the order does not depend on hashing.
        Distinct types sharing a module and qualified name (classes created
        by calling the same function twice) keep an unspecified order among
        themselves; pass a list to fix their order.

        If the build raises, the container stays unbuilt with an empty
        registry and ``build`` may be called again.

        Args:
            component_types: Candidate types; those without a component tag
                are skipped.

        Returns:
            The :class:`BuildResult`, listing construction failures, unfilled
            slots and skipped types alongside the registry.

        Raises:
            ContainerStateError: If the container has already been built.
            ConstructionError: If ``fail_on_construction_error`` is set and a
                type fails to construct.
            AmbiguousBeanError: If the ambiguity policy is ``FAIL_FAST`` and a
                slot matches several beans.
            DependencyError: If a slot declaration cannot be evaluated.
        """
        if self._state is ContainerState.BUILT:
            raise ContainerStateError("Container has already been built")

        candidates = _ordered(component_types)
        tagged = [t for t in candidates if self.options.is_component(t)]
        skipped = [t for t in candidates if t not in tagged]
        for skipped_type in skipped:
            logger.debug(f"Skipped {_name(skipped_type)}: not a component")

        logger.info(f"Building container from {len(tagged)} component types")

        beans, failures = self._factory.instantiate_all(tagged)
        if failures and self.options.fail_on_construction_error:
            raise failures[0].error

        # Published only once wiring succeeds, so a failed build leaves no beans
        registry = BeanRegistry(self.options.ambiguity)
        for bean in beans:
            registry.add(bean)

        unfilled = self._wirer.wire(registry)
        registry.freeze()
        self._registry = registry
        self._state = ContainerState.BUILT

        logger.info(
            f"Container built: {len(self._registry)} beans, "
            f"{len(failures)} construction failures, {len(unfilled)} unfilled slots"
        )
        return BuildResult(self._registry, failures, unfilled, skipped)

    def build_package(self, package_name: str) -> BuildResult:
        """Discover the classes in a package and build from the tagged ones.

        Raises:
            ImportError: If the package cannot be imported.
            ContainerStateError: If the container has already been built.
        """
        if self._state is ContainerState.BUILT:
            raise ContainerStateError("Container has already been built")
        return self.build(self.options.discover(package_name))

    def get_bean(self, bean_type: type[T]) -> T:
        """Return the bean that is an instance of ``bean_type``.

        Raises:
            BeanNotFoundError: If no compatible bean is registered.
            AmbiguousBeanError: If the policy is ``FAIL_FAST`` and several
                beans are compatible.
            ContainerStateError: If the container has not been built.
        """
        self._require_built()
        return self._registry.get(bean_type)

    def get_beans(self, bean_type: type[T]) -> list[T]:
        self._require_built()
        return self._registry.find_all(bean_type)

    def __getitem__(self, bean_type: type[T]) -> T:
        return self.get_bean(bean_type)

    def _require_built(self) -> None:
        if self._state is not ContainerState.BUILT:
            raise ContainerStateError("Container has not been built")


def _ordered(component_types: Iterable[Any]) -> list[Any]:
    if isinstance(component_types, (set, frozenset)):
        return sorted(
            component_types,
            key=lambda t: (getattr(t, "__module__", None) or "", _name(t)),
        )
    # Drop repeats, keeping the first position of each type
    return list(dict.fromkeys(component_types))


def _name(t: Any) -> str:
    return getattr(t, "__qualname__", repr(t))
