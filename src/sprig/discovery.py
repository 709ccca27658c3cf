"""Discovery of candidate component types inside a package.

The container never decides which modules to import; it asks this module for
the classes defined in a package and filters them by component tag itself.
"""

import importlib
import inspect
import pkgutil
from types import ModuleType

from loguru import logger

__all__ = ["discover_types_in_namespace"]


def discover_types_in_namespace(package_name: str) -> list[type]:
    """Import a package and all of its submodules and list the classes they define.

    Classes are returned in module order, then in definition order within
    each module. Classes a module merely imports are skipped, so each class
    is reported once, by the module that defines it.

    Args:
        package_name: Dotted name of a package (or a single module).

    Returns:
        The classes found.

    Raises:
        ImportError: If the package itself cannot be imported. Submodules
            that fail to import are logged and skipped.
    """
    logger.info(f"Scanning package: {package_name}")
    package = importlib.import_module(package_name)

    discovered = _classes_defined_in(package)
    if not hasattr(package, "__path__"):
        return discovered

    failed: set[str] = set()

    def log_walk_error(module_name: str) -> None:
        # walk_packages retries a subpackage import to recurse into it
        if module_name not in failed:
            logger.warning(f"Failed to scan package {module_name}")

    for _, module_name, _ in pkgutil.walk_packages(
        package.__path__, package.__name__ + ".", onerror=log_walk_error
    ):
        try:
            module = importlib.import_module(module_name)
        except Exception as e:
            logger.warning(f"Failed to scan module {module_name}: {e}")
            failed.add(module_name)
            continue
        discovered.extend(_classes_defined_in(module))

    logger.info(f"Found {len(discovered)} classes in {package_name}")
    return discovered


def _classes_defined_in(module: ModuleType) -> list[type]:
    return [
        obj
        for obj in vars(module).values()
        if inspect.isclass(obj) and obj.__module__ == module.__name__
    ]
