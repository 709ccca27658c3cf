"""Registry of live singleton beans.

Beans are kept in registration order. Lookups match by runtime type, so a
bean satisfies a request for its own class and for any of its base classes
or ABCs it is registered against.
"""

from enum import Enum
from typing import Any, Iterator, Optional, TypeVar

from sprig.errors import AmbiguousBeanError, BeanNotFoundError, ContainerStateError

__all__ = ["AmbiguityPolicy", "BeanRegistry"]

T = TypeVar("T")


class AmbiguityPolicy(Enum):
    """How a lookup behaves when several beans match the requested type."""

    FIRST_REGISTERED = "first_registered"
    FAIL_FAST = "fail_fast"


class BeanRegistry:
    """Ordered collection of beans with type-compatible lookup.

    Attributes:
        policy: The :class:`AmbiguityPolicy` applied by :meth:`find_first`.

    Example:
        >>> registry = BeanRegistry()
        >>> registry.add(SqlUserRepository())
        >>> registry.find_first(UserRepository)  # SqlUserRepository instance
    """

    def __init__(self, policy: AmbiguityPolicy = AmbiguityPolicy.FIRST_REGISTERED):
        self.policy = policy
        self._beans: list[Any] = []
        self._frozen = False

    def add(self, bean: Any) -> None:
        """Register a bean.

        Raises:
            ContainerStateError: If the registry has been frozen.
        """
        if self._frozen:
            raise ContainerStateError(
                f"Cannot add {type(bean).__name__}: the registry is frozen"
            )
        self._beans.append(bean)

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def find_all(self, bean_type: type[T]) -> list[T]:
        return [bean for bean in self._beans if isinstance(bean, bean_type)]

    def find_first(self, bean_type: type[T]) -> Optional[T]:
        """Find a bean compatible with ``bean_type``.

        With several candidates, ``FIRST_REGISTERED`` returns the earliest
        registered one and ``FAIL_FAST`` raises.

        Returns:
            The matching bean, or None if no bean is an instance of ``bean_type``.

        Raises:
            AmbiguousBeanError: If the policy is ``FAIL_FAST`` and more than
                one bean matches.
        """
        candidates = self.find_all(bean_type)
        if not candidates:
            return None
        if len(candidates) > 1 and self.policy is AmbiguityPolicy.FAIL_FAST:
            raise AmbiguousBeanError(bean_type, candidates)
        return candidates[0]

    def get(self, bean_type: type[T]) -> T:
        """Like :meth:`find_first`, but raising if nothing matches.

        Raises:
            BeanNotFoundError: If no bean is an instance of ``bean_type``.
        """
        bean = self.find_first(bean_type)
        if bean is None:
            raise BeanNotFoundError(bean_type)
        return bean

    def all(self) -> Iterator[Any]:
        """Return a one-shot iterator over the beans in registration order."""
        return iter(self._beans)

    def __iter__(self) -> Iterator[Any]:
        return self.all()

    def __len__(self) -> int:
        return len(self._beans)

    def __contains__(self, bean: Any) -> bool:
        return any(candidate is bean for candidate in self._beans)
