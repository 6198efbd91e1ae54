"""BAP Explorer — Categorical filter predicates for list endpoints."""
from enum import Enum
from typing import Any, Callable, Iterable, TypeVar

T = TypeVar("T")

Predicate = Callable[[Any], bool]


def attribute_filter(attribute: str, value: str | Enum | None) -> Predicate | None:
    """Predicate matching items whose `attribute` equals `value`.

    Returns None when no value was requested, meaning "match all".
    """
    if value is None:
        return None
    expected = value.value if isinstance(value, Enum) else value

    def predicate(item: Any) -> bool:
        actual = getattr(item, attribute)
        if isinstance(actual, Enum):
            actual = actual.value
        return actual == expected

    predicate.__name__ = f"{attribute}=={expected}"
    return predicate


def apply_filter(items: Iterable[T], predicate: Predicate | None) -> list[T]:
    if predicate is None:
        return list(items)
    return [item for item in items if predicate(item)]
