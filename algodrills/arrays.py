"""List and matrix exercises: sums, greedy choices and reordering."""

from __future__ import annotations

import heapq
from collections import deque
from functools import reduce
from operator import xor


def maximum_wealth(accounts: list[list[int]]) -> int:
    """Return the largest row sum, never less than zero."""
    return max([0, *(sum(account) for account in accounts)])


def max_profit(prices: list[int]) -> int:
    """Return the best gain from one buy followed by one later sell."""
    lowest: int | None = None
    best = 0
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        elif price - lowest > best:
            best = price - lowest
    return best


def single_number(nums: list[int]) -> int:
    """Return the value that is not paired, by folding with XOR."""
    return reduce(xor, nums, 0)


def missing_number(nums: list[int]) -> int:
    """Return the number from 0..len(nums) that is absent from nums."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def remove_element(nums: list[int], val: int) -> int:
    """Drop every occurrence of val from nums in place and return the new length."""
    nums[:] = [num for num in nums if num != val]
    return len(nums)


def largest_divisible_subset(nums: list[int]) -> list[int]:
    """Return a largest subset, ascending, in which each element divides the next."""
    values = sorted(nums)
    if not values:
        return []
    sizes = [1] * len(values)
    previous = [-1] * len(values)
    best = 0
    for i, value in enumerate(values):
        for j in range(i):
            if value % values[j] == 0 and sizes[i] < sizes[j] + 1:
                sizes[i] = sizes[j] + 1
                previous[i] = j
        if sizes[i] > sizes[best]:
            best = i
    subset: list[int] = []
    index = best
    while index != -1:
        subset.append(values[index])
        index = previous[index]
    subset.reverse()
    return subset


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    if not matrix:
        return
    width = len(matrix[0])
    rows = {i for i, row in enumerate(matrix) if 0 in row[:width]}
    cols = {j for row in matrix for j, value in enumerate(row[:width]) if value == 0}
    for i in rows:
        matrix[i][:width] = [0] * width
    for row in matrix:
        for j in cols:
            row[j] = 0


def num_rescue_boats(people: list[int], limit: int) -> int:
    """Return the fewest boats carrying at most two people within the weight limit."""
    waiting = deque(sorted(people))
    boats = 0
    while waiting:
        heaviest = waiting.pop()
        if waiting and waiting[0] + heaviest <= limit:
            waiting.popleft()
        boats += 1
    return boats


def merge_sorted(nums1: list[int], m: int, nums2: list[int], n: int) -> None:
    """Merge the first n of nums2 into the first m of nums1, in place.

    Raises ValueError when nums1 has no room for m + n values or nums2 has
    fewer than n.
    """
    if len(nums1) < m + n:
        raise ValueError(f"nums1 holds {len(nums1)} values, needs {m + n}")
    if len(nums2) < n:
        raise ValueError(f"nums2 holds {len(nums2)} values, needs {n}")
    nums1[: m + n] = list(heapq.merge(nums1[:m], nums2[:n]))


def deck_revealed_increasing(deck: list[int]) -> list[int]:
    """Order the deck so that revealing top, moving the next to the bottom, yields ascending cards."""
    pile: deque[int] = deque()
    for card in sorted(deck, reverse=True):
        if pile:
            pile.rotate(-1)
        pile.append(card)
    return list(reversed(pile))


def k_closest(points: list[list[int]], k: int) -> list[list[int]]:
    """Return the k points nearest the origin, nearest first, ties in input order."""
    ranked = sorted(points, key=lambda point: point[0] * point[0] + point[1] * point[1])
    return [list(point) for point in ranked[: max(k, 0)]]