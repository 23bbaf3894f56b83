import operator
import random
from collections.abc import Sequence

from .bits import random_bit_string
from .errors import IntegerConversionError, InvalidBaseRange, InvalidBasesType

# Below this bound the bases in DETERMINISTIC_BASES give an exact answer
DETERMINISM_LIMIT = 341550071728321

# https://oeis.org/A014233
DETERMINISTIC_BASES: list[tuple[int, tuple[int, ...]]] = [
    (2047, (2,)),
    (1373653, (2, 3)),
    (25326001, (2, 3, 5)),
    (3215031751, (2, 3, 5, 7)),
    (2152302898747, (2, 3, 5, 7, 11)),
    (3474749660383, (2, 3, 5, 7, 11, 13)),
]
LAST_DETERMINISTIC_BASES = (2, 3, 5, 7, 11, 13, 17)

# (bit length threshold, rounds), checked in order
ROUND_THRESHOLDS = [(1000, 2), (500, 3), (250, 4), (150, 5)]
MAX_ROUNDS = 6


def to_integer(value: object) -> int:
    """Accepts ints, integral floats, decimal strings and anything implementing __index__."""
    if isinstance(value, int):
        return value

    if isinstance(value, str):
        try:
            return int(value.strip(), 10)
        except ValueError:
            msg = f'Cannot convert {value!r} to an integer'
            raise IntegerConversionError(msg) from None

    if isinstance(value, float):
        if not value.is_integer():
            msg = f'Cannot convert non-integral float {value!r} to an integer'
            raise IntegerConversionError(msg)
        return int(value)

    try:
        return operator.index(value)  # type: ignore[arg-type]
    except TypeError:
        msg = f'Cannot convert {type(value)} to an integer'
        raise IntegerConversionError(msg) from None


def deterministic_bases_for(n: int) -> tuple[int, ...]:
    if n >= DETERMINISM_LIMIT:
        msg = f'No deterministic bases are known for n >= {DETERMINISM_LIMIT}'
        raise ValueError(msg)

    for threshold, bases in DETERMINISTIC_BASES:
        if n < threshold:
            return bases
    return LAST_DETERMINISTIC_BASES


def validate_bases(bases: Sequence[object] | None, n_minus_one: int) -> list[int] | None:
    """
    Coerces every base to int and checks it lies in [2, n - 2].
    None means that random bases should be drawn instead.
    """
    if bases is None:
        return None

    if not isinstance(bases, Sequence) or isinstance(bases, (str, bytes)):
        msg = f'Expected a sequence of bases, but got: {type(bases)}'
        raise InvalidBasesType(msg)

    res = []
    for value in bases:
        b = to_integer(value)
        if not 2 <= b < n_minus_one:  # noqa: PLR2004
            msg = f'Invalid base (must be in the range [2, n-2]): {b}'
            raise InvalidBaseRange(msg)
        res.append(b)
    return res


def random_base(n_bits: int, n_minus_one: int, rng: random.Random | None = None) -> int:
    # rejection sampling over n_bits wide values, the base must lie in [2, n - 2]
    while True:
        b = int(random_bit_string(n_bits, rng), 2)
        if 2 <= b < n_minus_one:  # noqa: PLR2004
            return b


# Larger inputs are far less likely to be falsely labelled as probable primes,
# so fewer rounds keep about the same accuracy
def adaptive_rounds(input_bits: int) -> int:
    for threshold, rounds in ROUND_THRESHOLDS:
        if input_bits > threshold:
            return rounds
    return MAX_ROUNDS
