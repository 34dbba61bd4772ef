"""
insertion_sort.py — Insertion Sort
==================================
The key a[i] walks left through the sorted prefix.  Each shift is
reported as swap(j, j+1): the larger element moves one slot right and
the key one slot left, so the array stays a permutation of the input at
every event and the key lands in its slot when the walk stops.

No set-final events: a prefix position can still move until the last
key has been inserted.
"""

from typing import Generator, List

from algotrace.model.array import ArrayModel
from algotrace.algorithms.step import StepEvent


PSEUDOCODE: List[str] = [
    "def InsertionSort(a):",                            # 0
    "    for i in 1 .. n-1:",                           # 1
    "        key ← a[i];  j ← i-1",                     # 2
    "        while j ≥ 0 and a[j] > key:",              # 3
    "            a[j+1] ← a[j];  j ← j-1",              # 4
    "        a[j+1] ← key",                             # 5
]


def insertion_sort(array: ArrayModel) -> Generator[StepEvent, None, None]:
    n = len(array)
    if n == 0:
        return

    for i in range(1, n):
        j = i - 1
        while j >= 0:
            # the key currently sits at j+1
            yield StepEvent.compare(
                j, j + 1,
                f"Inserting {array[j + 1]}: compare with {array[j]} at position {j}",
            )
            if not array.greater(j, j + 1):
                break
            array.swap(j, j + 1)
            yield StepEvent.swap(j, j + 1, f"Shifting {array[j + 1]} one position to the right")
            j -= 1

    yield StepEvent.done(message="Insertion Sort completed! Array is now sorted.")
