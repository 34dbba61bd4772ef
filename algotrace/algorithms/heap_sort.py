"""
heap_sort.py — Heap Sort
========================
  1. Build a max-heap bottom-up: heapify(i, n) for i = n/2-1 … 0
  2. For end = n-1 … 1: swap root with a[end], a[end] is final,
     heapify(0, end) on the shrunken heap
  3. a[0] is final

heapify compares the left child against the current largest, then the
right child against the (possibly updated) largest, and sifts down with
a swap when the parent lost.
"""

from typing import Generator, List

from algotrace.model.array import ArrayModel
from algotrace.algorithms.step import StepEvent


PSEUDOCODE: List[str] = [
    "def HeapSort(a):",                                 # 0
    "    for i in n/2-1 .. 0: heapify(a, i, n)",        # 1
    "    for end in n-1 .. 1:",                         # 2
    "        swap(a[0], a[end])",                       # 3
    "        heapify(a, 0, end)",                       # 4
    "def heapify(a, i, size):",                         # 5
    "    largest ← max(i, left(i), right(i))",          # 6
    "    if largest ≠ i: swap; heapify(a, largest)",    # 7
]


def heap_sort(array: ArrayModel) -> Generator[StepEvent, None, None]:
    n = len(array)
    if n == 0:
        return

    for i in range(n // 2 - 1, -1, -1):
        yield from _heapify(array, i, n)

    for end in range(n - 1, 0, -1):
        array.swap(0, end)
        yield StepEvent.swap(0, end, f"Moved heap root {array[end]} to position {end}")
        yield StepEvent.set_final(end, array[end], f"Position {end} now holds its final value {array[end]}")
        yield from _heapify(array, 0, end)

    yield StepEvent.set_final(0, array[0], "The single remaining element is in place")
    yield StepEvent.done(message="Heap Sort completed! Array is now sorted.")


def _heapify(array: ArrayModel, i: int, heap_size: int) -> Generator[StepEvent, None, None]:
    # iterative sift-down; each loop is one level of the textbook recursion
    while True:
        largest = i
        left, right = 2 * i + 1, 2 * i + 2

        if left < heap_size:
            yield StepEvent.compare(
                left, largest,
                f"Comparing {array[left]} (left child) and {array[largest]} (current largest)",
            )
            if array.greater(left, largest):
                largest = left

        if right < heap_size:
            yield StepEvent.compare(
                right, largest,
                f"Comparing {array[right]} (right child) and {array[largest]} (current largest)",
            )
            if array.greater(right, largest):
                largest = right

        if largest == i:
            return

        array.swap(i, largest)
        yield StepEvent.swap(i, largest, f"Sifted {array[largest]} down from index {i} to {largest}")
        i = largest
