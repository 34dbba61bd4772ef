"""
selection_sort.py — Selection Sort
==================================
For each position i, scan the unsorted tail for its minimum and swap it
into place.  At most one swap per outer pass; the compare events carry
(current minimum, candidate).
"""

from typing import Generator, List

from algotrace.model.array import ArrayModel
from algotrace.algorithms.step import StepEvent


PSEUDOCODE: List[str] = [
    "def SelectionSort(a):",                            # 0
    "    for i in 0 .. n-1:",                           # 1
    "        min ← i",                                  # 2
    "        for j in i+1 .. n-1:",                     # 3
    "            if a[j] < a[min]: min ← j",            # 4
    "        if min ≠ i: swap(a[i], a[min])",           # 5
    "        a[i] is final",                            # 6
]


def selection_sort(array: ArrayModel) -> Generator[StepEvent, None, None]:
    n = len(array)
    if n == 0:
        return

    for i in range(n):
        min_idx = i
        for j in range(i + 1, n):
            yield StepEvent.compare(
                min_idx, j,
                f"Comparing current minimum {array[min_idx]} (position {min_idx}) with {array[j]} (position {j})",
            )
            if array.greater(min_idx, j):
                min_idx = j

        if min_idx != i:
            array.swap(i, min_idx)
            yield StepEvent.swap(i, min_idx, f"Placing minimum element {array[i]} at position {i}")

        yield StepEvent.set_final(i, array[i], f"Position {i} now holds its final value {array[i]}")

    yield StepEvent.done(message="Selection Sort completed! Array is now sorted.")
