"""
Implements min-max heap operations over any indexable, swappable container.

A min-max heap is a complete binary tree stored in array form. Nodes on even
depths (min levels) are no larger than any of their descendants and nodes on
odd depths (max levels) are no smaller, so both the minimum and the maximum
can be found in constant time and removed in logarithmic time.

Like the standard library's heapq, the functions here keep no state of their
own; the container passed in owns all storage and only needs to provide the
HeapContainer methods.
"""
import logging
from typing import Any, List, Protocol, TypeVar


logger = logging.getLogger(__name__)

T = TypeVar("T")


class MinMaxHeapError(Exception):
    """
    Base class for errors raised by heap operations.
    """


class EmptyHeapError(MinMaxHeapError, IndexError):
    """
    Raised when removing or peeking at an element of an empty heap.
    """


class HeapIndexError(MinMaxHeapError, IndexError):
    """
    Raised when an index passed to fix() or remove() is out of range.
    """


class HeapContainer(Protocol):
    """
    Storage the heap functions operate on.
    """

    def __len__(self) -> int:
        ...

    def less(self, i: int, j: int) -> bool:
        """
        Returns true if the element at i orders strictly before the one at j.
        """
        ...

    def swap(self, i: int, j: int) -> None:
        ...

    def push(self, x: Any) -> None:
        """
        Appends x as the new last element.
        """
        ...

    def pop(self) -> Any:
        """
        Removes and returns the last element.
        """
        ...


class ListHeap(List[T]):
    """
    A list that satisfies HeapContainer by comparing its elements with `<`.

    Elements can be assigned directly (h[i] = x) as long as fix(h, i) is called
    afterwards.
    """

    def less(self, i: int, j: int) -> bool:
        return self[i] < self[j]  # type: ignore

    def swap(self, i: int, j: int) -> None:
        self[i], self[j] = self[j], self[i]

    def push(self, x: T) -> None:
        self.append(x)


def level(i: int) -> int:
    """
    Returns the depth of index i in the implicit tree; the root is at depth 0.
    """
    return (i + 1).bit_length() - 1


def is_min_level(i: int) -> bool:
    return level(i) % 2 == 0


def _beats(h: HeapContainer, i: int, j: int, is_min: bool) -> bool:
    # Whether i belongs above j on a level of the given kind.
    return h.less(i, j) if is_min else h.less(j, i)


def _trickle_down(h: HeapContainer, i: int, n: int) -> None:
    """
    Moves the element at i down until the subtree rooted at i, restricted to
    the first n elements, satisfies the heap invariant. The subtrees below i
    must already be valid.
    """
    is_min = is_min_level(i)
    while 2 * i + 1 < n:
        # Pick the most extreme of the children and grandchildren.
        m = 2 * i + 1
        for j in (2 * i + 2, 4 * i + 3, 4 * i + 4, 4 * i + 5, 4 * i + 6):
            if j >= n:
                break
            if _beats(h, j, m, is_min):
                m = j

        if not _beats(h, m, i, is_min):
            return

        h.swap(m, i)
        if m <= 2 * i + 2:
            return

        # The old value of i may be out of order with m's parent, which sits
        # on a level of the opposite kind.
        parent = (m - 1) // 2
        if _beats(h, parent, m, is_min):
            h.swap(m, parent)
        i = m


def _push_up_by_level(h: HeapContainer, i: int, is_min: bool) -> None:
    # Only grandparents share i's level kind.
    while i > 2:
        grandparent = (i - 3) // 4
        if not _beats(h, i, grandparent, is_min):
            return
        h.swap(i, grandparent)
        i = grandparent


def _push_up(h: HeapContainer, i: int) -> None:
    """
    Moves the element at i up until it is in order with all of its ancestors.
    """
    if i == 0:
        return

    parent = (i - 1) // 2
    is_min = is_min_level(i)
    if _beats(h, parent, i, is_min):
        h.swap(i, parent)
        _push_up_by_level(h, parent, not is_min)
    else:
        _push_up_by_level(h, i, is_min)


def _check_index(h: HeapContainer, i: int) -> None:
    if not 0 <= i < len(h):
        raise HeapIndexError(
            "index {} out of range for heap of size {}".format(i, len(h))
        )


def init(h: HeapContainer) -> None:
    """
    Establishes the heap invariant over the elements of h in place. O(n).
    """
    n = len(h)
    for i in reversed(range(n // 2)):
        _trickle_down(h, i, n)
    logger.debug("Heapified %d elements", n)


def push(h: HeapContainer, x: Any) -> None:
    """
    Pushes x onto the heap. O(log(n))
    """
    h.push(x)
    _push_up(h, len(h) - 1)


def peek_min(h: HeapContainer) -> int:
    """
    Returns the index of the minimum element.
    """
    if len(h) == 0:
        raise EmptyHeapError("peek at empty heap")
    return 0


def peek_max(h: HeapContainer) -> int:
    """
    Returns the index of the maximum element. With three or more elements it
    is whichever of the root's two children is larger.
    """
    n = len(h)
    if n == 0:
        raise EmptyHeapError("peek at empty heap")
    if n <= 2:
        return n - 1
    return 2 if h.less(1, 2) else 1


def _pop_at(h: HeapContainer, i: int) -> Any:
    n = len(h) - 1
    h.swap(i, n)
    _trickle_down(h, i, n)
    return h.pop()


def pop(h: HeapContainer) -> Any:
    """
    Removes and returns the minimum element. O(log(n))
    """
    if len(h) == 0:
        raise EmptyHeapError("pop from empty heap")
    return _pop_at(h, 0)


def pop_max(h: HeapContainer) -> Any:
    """
    Removes and returns the maximum element. O(log(n))
    """
    if len(h) == 0:
        raise EmptyHeapError("pop_max from empty heap")
    return _pop_at(h, peek_max(h))


def fix(h: HeapContainer, i: int) -> None:
    """
    Re-establishes the heap invariant after the element at index i has been
    changed in place. The change may go in either direction, so the element is
    first moved up past any ancestors it now violates and whatever ends up at i
    is then moved down. Each pass is a no-op when nothing is out of order.
    O(log(n))
    """
    _check_index(h, i)
    _push_up(h, i)
    _trickle_down(h, i, len(h))


def remove(h: HeapContainer, i: int) -> Any:
    """
    Removes and returns the element at index i. O(log(n))
    """
    _check_index(h, i)
    n = len(h) - 1
    if i != n:
        h.swap(i, n)
        _push_up(h, i)
        _trickle_down(h, i, n)
    return h.pop()


def is_valid(h: HeapContainer) -> bool:
    """
    Returns true if every element of h is in order with its children and
    grandchildren, which implies the invariant holds for whole subtrees.
    """
    n = len(h)
    for i in range(n // 2):
        is_min = is_min_level(i)
        for j in (2 * i + 1, 2 * i + 2, 4 * i + 3, 4 * i + 4, 4 * i + 5, 4 * i + 6):
            if j >= n:
                break
            if _beats(h, j, i, is_min):
                logger.debug(
                    "Heap invariant violated between index %d (%s level) and "
                    "descendant %d",
                    i,
                    "min" if is_min else "max",
                    j,
                )
                return False
    return True
