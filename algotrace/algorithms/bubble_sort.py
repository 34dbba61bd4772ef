"""
bubble_sort.py — Bubble Sort
============================
Generator-based bubble sort.  Yields a StepEvent at:
  1. Every adjacent comparison          →  compare(j, j+1)
  2. Every out-of-order pair            →  swap(j, j+1)
  3. End of each outer pass             →  set-final(n-1-i)
  4. Finish                             →  done

The swap is performed only after the compare event has been delivered,
so a cancellation observed between the two leaves the pair untouched.
"""

from typing import Generator, List

from algotrace.model.array import ArrayModel
from algotrace.algorithms.step import StepEvent


PSEUDOCODE: List[str] = [
    "def BubbleSort(a):",                               # 0
    "    for i in 0 .. n-1:",                           # 1
    "        for j in 0 .. n-i-2:",                     # 2
    "            if a[j] > a[j+1]:",                    # 3
    "                swap(a[j], a[j+1])",               # 4
    "        a[n-1-i] is final",                        # 5
]


def bubble_sort(array: ArrayModel) -> Generator[StepEvent, None, None]:
    n = len(array)
    if n == 0:
        return

    for i in range(n):
        for j in range(n - i - 1):
            yield StepEvent.compare(
                j, j + 1,
                f"Comparing elements at positions {j} and {j + 1}: {array[j]} and {array[j + 1]}",
            )
            if array.greater(j, j + 1):
                array.swap(j, j + 1)
                yield StepEvent.swap(
                    j, j + 1,
                    f"Swapped {array[j + 1]} and {array[j]} as they were out of order",
                )

        yield StepEvent.set_final(
            n - 1 - i, array[n - 1 - i],
            f"Element at position {n - 1 - i} is now in its final sorted position",
        )

    yield StepEvent.done(message="Bubble Sort completed! Array is now sorted.")
