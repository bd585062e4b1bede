"""Grid and graph search exercises."""

from __future__ import annotations

import math
from collections import defaultdict, deque
from collections.abc import Iterator

_START = "0000"
_STEPS = ((1, 0), (-1, 0), (0, -1), (0, 1))


def num_islands(grid: list[list[str]]) -> int:
    """Count the groups of '1' cells joined horizontally or vertically."""
    if not grid:
        return 0
    height, width = len(grid), len(grid[0])
    seen: set[tuple[int, int]] = set()
    islands = 0
    for r, row in enumerate(grid):
        for c, cell in enumerate(row[:width]):
            if cell != "1" or (r, c) in seen:
                continue
            islands += 1
            seen.add((r, c))
            stack = [(r, c)]
            while stack:
                cr, cc = stack.pop()
                for dr, dc in _STEPS:
                    nr, nc = cr + dr, cc + dc
                    if (
                        0 <= nr < height
                        and 0 <= nc < width
                        and (nr, nc) not in seen
                        and grid[nr][nc] == "1"
                    ):
                        seen.add((nr, nc))
                        stack.append((nr, nc))
    return islands


def _turns(combination: str) -> Iterator[str]:
    for i, digit in enumerate(combination):
        for delta in (-1, 1):
            turned = str((int(digit) + delta) % 10)
            yield combination[:i] + turned + combination[i + 1 :]


def open_lock(deadends: list[str], target: str) -> int:
    """Return the fewest wheel turns from '0000' to target avoiding deadends, or -1."""
    dead = set(deadends)
    if _START in dead:
        return -1
    queue = deque([(_START, 0)])
    visited = {_START}
    while queue:
        combination, moves = queue.popleft()
        if combination == target:
            return moves
        for following in _turns(combination):
            if following not in visited and following not in dead:
                visited.add(following)
                queue.append((following, moves + 1))
    return -1


def find_cheapest_price(
    n: int, flights: list[list[int]], src: int, dst: int, k: int
) -> int:
    """Return the cheapest fare from src to dst with at most k stops, or -1."""
    routes: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
    for origin, destination, price in flights:
        routes[origin].append((destination, price))
    best = [math.inf] * n
    best[src] = 0
    frontier = [(src, 0)]
    for _ in range(k + 1):
        next_frontier: list[tuple[int, int]] = []
        for city, fare in frontier:
            for destination, price in routes.get(city, ()):
                total = fare + price
                if total < best[destination]:
                    best[destination] = total
                    next_frontier.append((destination, total))
        frontier = next_frontier
    return -1 if best[dst] == math.inf else int(best[dst])


def find_judge(n: int, trust: list[list[int]]) -> int:
    """Return the person trusted by all who trusts nobody, or -1."""
    if not trust:
        return 1 if n == 1 else -1
    candidate = (n * n + n) // 2
    trusted_by: dict[int, set[int]] = {}
    for truster, trusted in trust:
        if truster not in trusted_by:
            candidate -= truster
            trusted_by[truster] = set()
        trusted_by[truster].add(trusted)
    if candidate and all(candidate in trusted for trusted in trusted_by.values()):
        return candidate
    return -1