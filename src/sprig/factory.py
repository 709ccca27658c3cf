"""Construction of beans from component types.

Components are built with their no-argument constructor only. No constructor
ever receives another bean, so every bean can be built before any is wired.
"""

import inspect
from typing import Any, Iterable

from loguru import logger

from sprig.domain import ConstructionFailure
from sprig.errors import ConstructionError

__all__ = ["InstanceFactory"]

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


class InstanceFactory:
    """Build one bean per component type."""

    def instantiate(self, component_type: type) -> Any:
        """Call ``component_type`` with no arguments.

        Args:
            component_type: The class to instantiate.

        Returns:
            The new bean.

        Raises:
            ConstructionError: If ``component_type`` is not a class, needs
                constructor arguments, or raises while being constructed.
        """
        if not inspect.isclass(component_type):
            raise ConstructionError(
                component_type, f"{component_type!r} is not a class"
            )
        _check_no_argument_constructor(component_type)

        try:
            return component_type()
        except Exception as e:
            raise ConstructionError(
                component_type,
                f"Failed to construct {component_type.__qualname__}: {e}",
            ) from e

    def instantiate_all(
        self, component_types: Iterable[type]
    ) -> tuple[list[Any], list[ConstructionFailure]]:
        """Instantiate a batch of types, collecting failures instead of stopping.

        Returns:
            The beans that were built, in input order, and a failure for each
            type that could not be built.
        """
        beans = []
        failures = []
        for component_type in component_types:
            try:
                beans.append(self.instantiate(component_type))
            except ConstructionError as e:
                logger.warning(str(e))
                failures.append(ConstructionFailure(component_type, e))
            else:
                logger.debug(f"Instantiated {component_type.__qualname__}")
        return beans, failures


def _check_no_argument_constructor(component_type: type) -> None:
    try:
        signature = inspect.signature(component_type)
    except (TypeError, ValueError):
        # No introspectable signature (some builtins); let the call decide.
        return

    required = [
        name
        for name, param in signature.parameters.items()
        if param.default is param.empty and param.kind not in _VARIADIC
    ]
    if required:
        raise ConstructionError(
            component_type,
            f"{component_type.__qualname__} has no no-argument constructor: "
            f"parameters {required} are required",
        )
