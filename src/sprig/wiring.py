"""Filling dependency slots of registered beans.

Wiring runs once, after every bean has been constructed. Each slot of each
bean is matched against the whole registry, so beans that refer to each
other are wired without any ordering or cycle handling.
"""

from typing import Any, Callable

from loguru import logger

from sprig.domain import UnfilledSlot
from sprig.markers import dependency_slots, is_inject
from sprig.registry import BeanRegistry

__all__ = ["DependencyWirer"]


class DependencyWirer:
    """Assign beans from a registry to the dependency slots of every bean."""

    def __init__(self, is_inject: Callable[[Any], bool] = is_inject):
        self._is_inject = is_inject

    def wire(self, registry: BeanRegistry) -> list[UnfilledSlot]:
        """Wire every bean in the registry.

        A slot with no compatible bean is left as it is (or set to None if
        the bean has no such attribute) and reported; it is not an error.

        Args:
            registry: The completed registry of beans.

        Returns:
            The slots that could not be filled, in wiring order.

        Raises:
            AmbiguousBeanError: If the registry's policy forbids choosing
                between several compatible beans.
            DependencyError: If a slot declaration is invalid.
        """
        unfilled = []
        for bean in registry.all():
            for slot in dependency_slots(type(bean), self._is_inject):
                dependency = registry.find_first(slot.declared_type)
                if dependency is None:
                    if not hasattr(bean, slot.name):
                        setattr(bean, slot.name, None)
                    logger.debug(f"No bean for slot {UnfilledSlot(bean, slot)}")
                    unfilled.append(UnfilledSlot(bean, slot))
                    continue

                setattr(bean, slot.name, dependency)
                logger.debug(
                    f"Wired {type(dependency).__qualname__} into "
                    f"{slot.owner.__qualname__}.{slot.name}"
                )
        return unfilled
