"""
Implements a min-max heap with dynamically adjustable keys.
"""
from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

import minmaxheap


TK = TypeVar("TK")
TV = TypeVar("TV")
KeyFunc = Callable[[TV], TK]


class AdjustableHeapKey(Generic[TK, TV]):
    """
    Object wrapper to store heap object metadata. Client code should treat
    this object as an opaque key that can be passed back to adjust_key() or
    remove() to change or delete the value associated with it.
    """

    __slots__ = ("val", "comp_key", "index")

    def __init__(self, val: TV, comp_key: TK, index: int):
        self.val = val
        self.comp_key = comp_key
        self.index = index


class _KeyList(List[AdjustableHeapKey[TK, TV]]):
    # Heap storage that keeps each key's index current as it is moved.

    def less(self, i: int, j: int) -> bool:
        return self[i].comp_key < self[j].comp_key  # type: ignore

    def swap(self, i: int, j: int) -> None:
        self[i], self[j] = self[j], self[i]
        self[i].index = i
        self[j].index = j

    def push(self, key: AdjustableHeapKey[TK, TV]) -> None:
        key.index = len(self)
        self.append(key)

    def pop(self) -> AdjustableHeapKey[TK, TV]:  # type: ignore[override]
        key = super().pop()
        key.index = -1
        return key


class AdjustableMinMaxHeap(Generic[TK, TV]):
    """
    Implements a dynamically adjustable min-max heap. Both the minimum and the
    maximum value can be read in O(1) and removed in O(log(n)).
    """

    def __init__(
        self, key_func: Optional[KeyFunc] = None, items: Iterable[TV] = ()
    ) -> None:
        """
        Constructs a heap holding `items`, ordered by `key_func` if given or
        by the values themselves otherwise.
        """
        self.key_func = key_func
        self.heap: _KeyList[TK, TV] = _KeyList()
        for val in items:
            self.heap.push(AdjustableHeapKey(val, self._comp_key(val), 0))
        minmaxheap.init(self.heap)

    def _comp_key(self, val: TV) -> TK:
        return self.key_func(val) if self.key_func else val  # type: ignore

    def _check_key(self, key: AdjustableHeapKey[TK, TV]) -> None:
        if not 0 <= key.index < len(self.heap) or self.heap[key.index] is not key:
            raise KeyError("key is not in this heap")

    def push(self, val: TV) -> AdjustableHeapKey[TK, TV]:
        """
        Pushes a new value to the heap and returns its key.
        """
        key = AdjustableHeapKey(val, self._comp_key(val), 0)
        minmaxheap.push(self.heap, key)
        return key

    def pop(self) -> TV:
        """
        Removes the minimum element from the heap and returns it.
        """
        return minmaxheap.pop(self.heap).val

    def pop_max(self) -> TV:
        """
        Removes the maximum element from the heap and returns it.
        """
        return minmaxheap.pop_max(self.heap).val

    def peek(self) -> TV:
        """
        Returns the minimum element from the heap without removing it.
        """
        return self.heap[minmaxheap.peek_min(self.heap)].val

    def peek_max(self) -> TV:
        """
        Returns the maximum element from the heap without removing it.
        """
        return self.heap[minmaxheap.peek_max(self.heap)].val

    def adjust_key(self, key: AdjustableHeapKey[TK, TV], val: TV) -> None:
        """
        Sets the value of an existing object using its heap key and adjusts
        its position within the heap.
        """
        self._check_key(key)
        key.val = val
        key.comp_key = self._comp_key(val)
        minmaxheap.fix(self.heap, key.index)

    def remove(self, key: AdjustableHeapKey[TK, TV]) -> TV:
        """
        Remove an element from the heap given its heap key and return its
        value.
        """
        self._check_key(key)
        return minmaxheap.remove(self.heap, key.index).val

    def __iter__(self) -> Iterator[TV]:
        """
        Iterates over the values in heap order.
        """
        return (key.val for key in self.heap)

    def __len__(self) -> int:
        """
        Returns the number of elements in the heap.
        """
        return len(self.heap)

    def __bool__(self) -> bool:
        """
        Returns true if the heap is not empty.
        """
        return bool(self.heap)
