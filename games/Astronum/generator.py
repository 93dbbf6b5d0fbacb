"""
Token value generator.

Produces the numbers shown on the asteroids. A valid set has exactly one
triple {a, b, c} with a + b = c, so the captcha has a single answer (up to
swapping the two addends), and no triple reaching the maximum sum.
"""
import random
from itertools import combinations
from typing import Optional, Protocol, Sequence, Tuple

from games.Astronum import config
from minigame.logging import get_logger

log = get_logger('astronum.generator')


class GenerationError(ValueError):
    """Raised when no valid token set was found for the given parameters."""


# 1 + 1 = 2 is the smallest solving triple, and its sum must stay below the bound
MIN_COUNT = 3
MIN_BOUND = 5


class RandomSource(Protocol):
    """Anything with random.randint's signature (random module, random.Random)."""

    def randint(self, a: int, b: int) -> int: ...


def count_solutions(values: Sequence[int]) -> int:
    """Count the triples in which two elements sum to the third."""
    count = 0
    for a, b, c in combinations(values, 3):
        if a + b == c or a + c == b or b + c == a:
            count += 1
    return count


def exceeds_bound(values: Sequence[int], bound: int) -> bool:
    """Check whether any triple sums to `bound` or more.

    The three largest values form the largest triple sum, so checking them
    covers every triple.
    """
    return sum(sorted(values, reverse=True)[:3]) >= bound


def satisfies_constraints(values: Sequence[int], bound: int) -> bool:
    """Check a candidate token set.

    Args:
        values: Candidate values
        bound: Exclusive bound on every value and on every triple sum

    Returns:
        True if all values lie in [1, bound - 1], no triple sums to bound or
        more, and exactly one triple solves a + b = c.
    """
    if any(v < 1 or v >= bound for v in values):
        return False
    if exceeds_bound(values, bound):
        return False
    return count_solutions(values) == 1


def generate(
    count: int,
    bound: int,
    rng: Optional[RandomSource] = None,
    max_attempts: int = config.MAX_GENERATION_ATTEMPTS,
) -> Tuple[int, ...]:
    """Draw a valid token set by rejection sampling.

    Each attempt draws `count` independent integers in [1, bound - 1] and
    keeps them only if no triple reaches `bound` and exactly one triple
    satisfies a + b = c.

    For count=6, bound=100 roughly one draw in 160 passes the sum check and
    a few hundred draws are needed on average. The expected number of
    attempts grows quickly with count / bound, hence the cap. Parameters
    that can never succeed (fewer than MIN_COUNT values, a bound below
    MIN_BOUND) are refused before drawing anything.

    Args:
        count: Number of values (at least 3)
        bound: Exclusive upper bound
        rng: Random source, defaults to the random module
        max_attempts: Draws to try before giving up

    Returns:
        Tuple of `count` integers

    Raises:
        GenerationError: If the parameters are infeasible or no valid set
            was drawn within max_attempts.
    """
    if count < MIN_COUNT or bound < MIN_BOUND:
        raise GenerationError(
            f"No set of {count} values below {bound} can have a unique solution "
            f"(need at least {MIN_COUNT} values and a bound of at least {MIN_BOUND})"
        )

    rng = rng or random
    for attempt in range(1, max_attempts + 1):
        values = tuple(rng.randint(1, bound - 1) for _ in range(count))

        if exceeds_bound(values, bound):
            continue
        if count_solutions(values) != 1:
            continue

        log.debug("Generated %s after %d attempts", values, attempt)
        return values

    raise GenerationError(
        f"No set of {count} values below {bound} with a unique solution "
        f"after {max_attempts} attempts"
    )
