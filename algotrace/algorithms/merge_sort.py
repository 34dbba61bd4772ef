"""
merge_sort.py — Merge Sort
==========================
Top-down recursive merge sort on the shared array.

  • Split [left, right] at mid = (left + right) // 2
  • Sort both halves (recursively, via `yield from`)
  • Merge with two pointers: first fix the merged order, then swap each
    element into its slot from left to right

Events:
  compare(i, j)       – one per two-pointer comparison
  swap(k, p)          – element bound for slot k is fetched from slot p
  set-final(k, value) – one per merged slot, carrying its value

The merge is STABLE: on ties (a[i] <= a[j]) the left element is taken
first, so equal values keep their input order.
"""

from typing import Dict, Generator, List

from algotrace.model.array import ArrayModel
from algotrace.algorithms.step import StepEvent


PSEUDOCODE: List[str] = [
    "def MergeSort(a, left, right):",                   # 0
    "    if left ≥ right: return",                      # 1
    "    mid ← (left + right) / 2",                     # 2
    "    MergeSort(a, left, mid)",                      # 3
    "    MergeSort(a, mid+1, right)",                   # 4
    "    Merge(a, left, mid, right)",                   # 5
    "def Merge(a, left, mid, right):",                  # 6
    "    take the smaller head; ties go left",          # 7
    "    swap each element of the merge into its slot", # 8
]


def merge_sort(array: ArrayModel) -> Generator[StepEvent, None, None]:
    n = len(array)
    if n == 0:
        return

    yield from _sort_range(array, 0, n - 1)
    yield StepEvent.done(message="Merge Sort completed! Array is now sorted.")


def _sort_range(array: ArrayModel, left: int, right: int) -> Generator[StepEvent, None, None]:
    if left >= right:
        return
    mid = (left + right) // 2
    yield from _sort_range(array, left, mid)
    yield from _sort_range(array, mid + 1, right)
    yield from _merge(array, left, mid, right)


def _merge(array: ArrayModel, left: int, mid: int, right: int) -> Generator[StepEvent, None, None]:
    # decide the merged order first; nothing is moved while comparing
    i, j = left, mid + 1
    order: List[int] = []

    while i <= mid and j <= right:
        yield StepEvent.compare(i, j, f"Comparing {array[i]} and {array[j]} for merge")
        if array.less_or_equal(i, j):
            order.append(i)
            i += 1
        else:
            order.append(j)
            j += 1

    order.extend(range(i, mid + 1))
    order.extend(range(j, right + 1))

    # then swap each element into its slot; the segment is a permutation
    # of its input at every yield
    position: Dict[int, int] = {src: src for src in order}   # source index → current slot
    occupant: Dict[int, int] = {src: src for src in order}   # slot → source index

    for k, src in enumerate(order, start=left):
        at = position[src]
        if at != k:
            displaced = occupant[k]
            array.swap(k, at)
            position[src], position[displaced] = k, at
            occupant[k], occupant[at] = src, displaced
            yield StepEvent.swap(k, at, f"Moving {array[k]} from position {at} into position {k}")
        yield StepEvent.set_final(k, array[k], f"Placed {array[k]} at position {k}")
