import logging
from collections.abc import Callable, Iterable
from typing import Any

from src.min_pq.min_pq import MinPQ

logger = logging.getLogger(__name__)


def get_topk(pq: MinPQ, k: int) -> list[Any]:
    """
    Function to get the top-K elements from a priority queue.

    The elements are returned from highest to lowest priority, as decided
    by the queue's compare function. The queue itself is not modified.

    Parameters
    ----------
    pq : MinPQ
        A MinPQ object
    k : int
        The number of 'top-K' elements to retrieve.

    Returns
    -------
    list[Any]
        The 'top-K' elements.
    """
    if k <= 0:
        return []
    if pq.is_empty():
        return []

    n = min(k, len(pq))
    logger.debug("Extracting top %d of %d elements", n, len(pq))
    dup = pq.copy()
    return [dup.remove_min() for _ in range(n)]


def heapsort(
    items: Iterable[Any],
    compare_func: Callable[[Any, Any], bool]
) -> list[Any]:
    """
    Sort `items` from highest to lowest priority under `compare_func`.

    Parameters
    ----------
    items : Iterable[Any]
        The elements to sort.
    compare_func : Callable[[Any, Any], bool]
        Returns True when the first argument has higher priority.

    Returns
    -------
    list[Any]
        A new sorted list. Equal elements keep no particular order.
    """
    pq = MinPQ.from_sequence(items, compare_func)
    logger.debug("Heapsorting %d elements", len(pq))
    return pq.to_sorted_list()
