import random
import unittest

import minmaxheap
from adjustable_heap import AdjustableMinMaxHeap
from minmaxheap import EmptyHeapError


class AdjustableMinMaxHeapTest(unittest.TestCase):
  def assertConsistent(self, heap):
    self.assertTrue(minmaxheap.is_valid(heap.heap))
    for index, key in enumerate(heap.heap):
      self.assertEqual(key.index, index)

  def test_push_pop(self):
    heap = AdjustableMinMaxHeap()
    for val in [6, 10, 13, 3, 12, 8, 12, 2, 12, 16]:
      heap.push(val)
      self.assertConsistent(heap)

    self.assertEqual(len(heap), 10)
    self.assertEqual(heap.peek(), 2)
    self.assertEqual(heap.peek_max(), 16)
    self.assertEqual(heap.pop(), 2)
    self.assertEqual(heap.pop_max(), 16)
    self.assertEqual(heap.pop_max(), 13)
    self.assertEqual(heap.pop(), 3)
    self.assertConsistent(heap)
    self.assertEqual(sorted(heap), [6, 8, 10, 12, 12, 12])

  def test_items_and_key_func(self):
    words = ["pear", "fig", "banana", "kiwi", "apple"]
    heap = AdjustableMinMaxHeap(key_func=len, items=words)
    self.assertConsistent(heap)
    self.assertEqual(heap.peek(), "fig")
    self.assertEqual(heap.pop_max(), "banana")
    self.assertEqual(heap.pop_max(), "apple")
    self.assertEqual(heap.pop(), "fig")
    self.assertEqual(sorted(heap), ["kiwi", "pear"])

  def test_adjust_key(self):
    heap = AdjustableMinMaxHeap(key_func=lambda x: x[1])
    keys = {name: heap.push((name, dist)) for name, dist in
            [("a", 5), ("b", 9), ("c", 3), ("d", 7), ("e", 11), ("f", 4)]}
    self.assertEqual(heap.peek(), ("c", 3))

    heap.adjust_key(keys["e"], ("e", 1))
    self.assertConsistent(heap)
    self.assertEqual(heap.peek(), ("e", 1))

    heap.adjust_key(keys["e"], ("e", 20))
    self.assertConsistent(heap)
    self.assertEqual(heap.peek(), ("c", 3))
    self.assertEqual(heap.peek_max(), ("e", 20))

    self.assertEqual(heap.pop(), ("c", 3))
    self.assertEqual(heap.pop(), ("f", 4))
    self.assertEqual(heap.pop_max(), ("e", 20))

  def test_remove(self):
    heap = AdjustableMinMaxHeap()
    keys = [heap.push(val) for val in range(20)]

    for val in (0, 19, 7, 12):
      self.assertEqual(heap.remove(keys[val]), val)
      self.assertConsistent(heap)

    self.assertEqual(heap.peek(), 1)
    self.assertEqual(heap.peek_max(), 18)
    self.assertEqual(len(heap), 16)

  def test_random_adjustments(self):
    rng = random.Random(1234)
    heap = AdjustableMinMaxHeap()
    live = {}
    for _ in range(400):
      op = rng.randrange(4)
      if op == 0 or not live:
        val = rng.randrange(1000)
        key = heap.push(val)
        live[id(key)] = key
      elif op == 1:
        key = rng.choice(list(live.values()))
        heap.adjust_key(key, rng.randrange(1000))
      elif op == 2:
        key = live.pop(rng.choice(list(live)))
        heap.remove(key)
      else:
        expected = min(key.val for key in live.values())
        self.assertEqual(heap.peek(), expected)
        self.assertEqual(heap.peek_max(), max(key.val for key in live.values()))
      self.assertConsistent(heap)
    self.assertEqual(sorted(heap), sorted(key.val for key in live.values()))

  def test_stale_keys(self):
    heap = AdjustableMinMaxHeap()
    key = heap.push(1)
    heap.push(2)
    self.assertEqual(heap.remove(key), 1)

    with self.assertRaises(KeyError):
      heap.remove(key)
    with self.assertRaises(KeyError):
      heap.adjust_key(key, 5)

    other = AdjustableMinMaxHeap()
    other_key = other.push(3)
    with self.assertRaises(KeyError):
      heap.remove(other_key)
    self.assertEqual(list(heap), [2])

  def test_empty(self):
    heap = AdjustableMinMaxHeap()
    self.assertFalse(heap)
    with self.assertRaises(EmptyHeapError):
      heap.pop()
    with self.assertRaises(EmptyHeapError):
      heap.pop_max()
    with self.assertRaises(EmptyHeapError):
      heap.peek()

    heap.push(1)
    self.assertTrue(heap)
    self.assertEqual(heap.pop_max(), 1)
    self.assertFalse(heap)


if __name__ == "__main__":
  unittest.main()
