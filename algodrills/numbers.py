"""Integer exercises: bits, digits and sequences."""

_UINT32_MASK = 0xFFFFFFFF


def hamming_weight(n: int) -> int:
    """Count the set bits of n taken as an unsigned 32-bit value."""
    return bin(n & _UINT32_MASK).count("1")


def range_bitwise_and(left: int, right: int) -> int:
    """Return the bitwise AND of every integer from left to right inclusive."""
    shift = 0
    while left != right and left > 0:
        shift += 1
        left >>= 1
        right >>= 1
    return left << shift


def is_power_of_two(n: int) -> bool:
    """Return True when n is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def _digit_sum(num: int) -> int:
    return sum(int(digit) for digit in str(num))


def add_digits(num: int) -> int:
    """Repeatedly sum the decimal digits of num until one digit is left.

    A negative number gives the negated digit sum of its magnitude, once.
    """
    if num < 0:
        return -_digit_sum(-num)
    while num > 9:
        num = _digit_sum(num)
    return num


def fib(n: int) -> int:
    """Return the n-th Fibonacci number; n below 2 is returned unchanged."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def is_palindrome(x: int) -> bool:
    """Return True when the decimal text of x reads the same reversed."""
    text = str(x)
    return text == text[::-1]