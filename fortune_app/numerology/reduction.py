"""Digit-root reduction shared by the numerology calculations."""


def digit_root(value: int) -> int:
    """
    Reduce an integer to a single digit (1-9) by repeated digit summation.

    A reduction that ends at 0 yields 1, so the result is always in 1-9.

    Example:
        25 -> 2+5 = 7
        99 -> 9+9 = 18 -> 1+8 = 9
    """
    n = abs(value)
    while n > 9:
        n = sum(int(d) for d in str(n))
    return 1 if n == 0 else n
