"""String exercises: brackets, characters, digits and anagrams."""

from collections import Counter

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def is_valid_parentheses(s: str) -> bool:
    """Return True when every bracket in s is closed in the right order.

    Raises ValueError for a character that is not a bracket.
    """
    stack: list[str] = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
        elif ch in _PAIRS:
            if not stack or stack[-1] != _PAIRS[ch]:
                return False
            stack.pop()
        else:
            raise ValueError(f"not a bracket: {ch!r}")
    return not stack


def first_unique_char(s: str) -> int:
    """Return the index of the first character occurring once in s, or -1."""
    counts = Counter(s)
    return next((index for index, ch in enumerate(s) if counts[ch] == 1), -1)


def remove_k_digits(num: str, k: int) -> str:
    """Remove k digits from num to leave the smallest possible number.

    Raises ValueError when k exceeds the number of digits.
    """
    if k > len(num):
        raise ValueError(f"cannot remove {k} digits from {len(num)}")
    if k == len(num):
        return "0"
    stack: list[str] = []
    for ch in num:
        while stack and k > 0 and ch < stack[-1]:
            stack.pop()
            k -= 1
        stack.append(ch)
    if k > 0:
        del stack[-k:]
    return "".join(stack).lstrip("0") or "0"


def group_anagrams(strs: list[str]) -> list[list[str]]:
    """Group the strings that are anagrams of one another."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())