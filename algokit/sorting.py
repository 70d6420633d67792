"""Classic comparison sorts, each returning a new ascending list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def _sift_down(heap: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by building a max-heap and repeatedly moving its root to the end."""
    result = list(items)
    size = len(result)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(result, size, root)
    for end in range(size - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, end, 0)
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def _merge(left: list[Any], right: list[Any]) -> Iterator[Any]:
    left_iter, right_iter = iter(left), iter(right)
    sentinel = object()
    a = next(left_iter, sentinel)
    b = next(right_iter, sentinel)
    while a is not sentinel and b is not sentinel:
        if a <= b:
            yield a
            a = next(left_iter, sentinel)
        else:
            yield b
            b = next(right_iter, sentinel)
    if a is not sentinel:
        yield a
        yield from left_iter
    if b is not sentinel:
        yield b
        yield from right_iter


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Stable sort by splitting in halves and merging the sorted halves."""
    result = list(items)
    if len(result) < 2:
        return result
    mid = (len(result) - 1) // 2 + 1
    return list(_merge(merge_sort(result[:mid]), merge_sort(result[mid:])))


def _partition(values: list[Any], low: int, high: int) -> int:
    pivot = values[high]
    boundary = low - 1
    for i in range(low, high):
        if values[i] <= pivot:
            boundary += 1
            values[boundary], values[i] = values[i], values[boundary]
    values[boundary + 1], values[high] = values[high], values[boundary + 1]
    return boundary + 1


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around the last element of each range."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(result, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return result