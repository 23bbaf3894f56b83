import secrets

from .miller_rabin import PrimalityOptions, primality_test


# Inputs below DETERMINISM_LIMIT get an exact answer, larger ones a probable one
def is_prime(n: int, rounds: int | None = None) -> bool:
    options = PrimalityOptions(num_rounds=rounds, find_divisor=False, small_determinism_mode=True)
    return primality_test(n, options).probable_prime


# Returns a random prime from range [2, n)
def random_prime(n: int) -> int:
    if n <= 2:  # noqa: PLR2004
        msg = f'There are no primes below {n}'
        raise ValueError(msg)

    while True:
        x = secrets.randbelow(n)
        if is_prime(x):
            return x
