import random
import secrets


def bit_length(x: int) -> int:
    return x.bit_length()


def two_adic_valuation(x: int) -> int:
    """
    Multiplicity of 2 in x: if x = 2^k * d with d odd, returns k.

    Callers must pass x > 0. Zero has no lowest set bit, so 0 is returned
    for it only as a convention.
    """
    if x == 0:
        return 0

    k = 0
    while not (x >> k) & 1:
        k += 1
    return k


def random_bit_string(num_bits: int, rng: random.Random | None = None) -> str:
    """
    Returns exactly num_bits characters of '0'/'1'.

    Every bit comes straight from the source, so no reduction bias appears.
    Pass a seeded random.Random to get reproducible draws.
    """
    if num_bits < 1:
        msg = f'num_bits must be positive, but got: {num_bits}'
        raise ValueError(msg)

    bits = rng.getrandbits(num_bits) if rng is not None else secrets.randbits(num_bits)
    return format(bits, f'0{num_bits}b')
