"""Backoff utilities.

`backoff_delay` computes the delay before the n-th retry of an exponential
strategy: `initial_delay * multiplier ** (attempt - 1)`, capped at `max_delay`.
"""


def backoff_delay(
    attempt: int,
    initial_delay: float,
    max_delay: float,
    multiplier: float,
) -> float:
    if attempt <= 1:
        return min(initial_delay, max_delay)
    return min(initial_delay * multiplier ** (attempt - 1), max_delay)
