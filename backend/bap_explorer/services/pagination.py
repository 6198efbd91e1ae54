"""BAP Explorer — Pagination engine.

Two source shapes share one contract, `(page, limit, predicate) -> Window`:

* bounded sources of known size N (blocks counted down from the tip, fixed
  catalogs). `total` is exact: N, or the filtered count when a predicate is
  given (the catalog is scanned once to count it).
* unbounded generative sources (penalties). Items are generated from index
  `(page - 1) * limit`, kept when they pass the predicate, until `limit` are
  collected or `max_attempts` indices have been tried. `total` is a supplied
  estimate and the window is marked `total_is_estimate`.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, Generic, TypeVar

from bap_explorer.core.errors import InvalidParameter
from bap_explorer.services.filters import Predicate

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Window(Generic[T]):
    """One page of an ordered source."""

    items: list[T] = field(default_factory=list)
    total: int = 0
    total_is_estimate: bool = False


def validate_window(page: int, limit: int, max_limit: int | None = None) -> None:
    """Reject out-of-range paging instead of clamping it."""
    if page < 1:
        raise InvalidParameter(f"page must be >= 1, got {page}", field="page")
    if limit < 1:
        raise InvalidParameter(f"limit must be >= 1, got {limit}", field="limit")
    if max_limit is not None and limit > max_limit:
        raise InvalidParameter(f"limit must be <= {max_limit}, got {limit}", field="limit")


def paginate_bounded(
    size: int,
    page: int,
    limit: int,
    item_at: Callable[[int], T],
    predicate: Predicate | None = None,
    *,
    max_limit: int | None = None,
) -> Window[T]:
    """Window over positions 0..size-1 of a bounded source in native order.

    With a predicate every position is built and tested, O(size) per request, so
    filtered paging is only meant for small catalogs such as the pool list.
    """
    validate_window(page, limit, max_limit)
    start = (page - 1) * limit

    if predicate is None:
        stop = min(start + limit, size)
        items = [item_at(i) for i in range(start, stop)]
        return Window(items=items, total=max(size, 0))

    matching = [item for item in (item_at(i) for i in range(size)) if predicate(item)]
    return Window(items=matching[start:start + limit], total=len(matching))


def paginate_descending(
    top: int,
    page: int,
    limit: int,
    item_at_key: Callable[[int], T],
    *,
    max_limit: int | None = None,
) -> Window[T]:
    """Window over keys top, top-1, ..., 1 (e.g. block heights). Never yields keys < 1."""
    return paginate_bounded(top, page, limit, lambda i: item_at_key(top - i), max_limit=max_limit)


def paginate_generative(
    page: int,
    limit: int,
    item_at: Callable[[int], T | None],
    predicate: Predicate | None,
    *,
    max_attempts: int,
    total: int,
    max_limit: int | None = None,
) -> Window[T]:
    """Filtered window over an unbounded generator, capped at `max_attempts` generations.

    `item_at` returning None marks the end of the source; the window stops there.
    """
    validate_window(page, limit, max_limit)
    items: list[T] = []
    index = (page - 1) * limit
    attempts = 0
    while len(items) < limit and attempts < max_attempts:
        item = item_at(index)
        if item is None:
            break
        index += 1
        attempts += 1
        if predicate is None or predicate(item):
            items.append(item)
    if len(items) < limit:
        logger.debug("Generative window stopped after %d attempts with %d/%d items", attempts, len(items), limit)
    return Window(items=items, total=total, total_is_estimate=True)
