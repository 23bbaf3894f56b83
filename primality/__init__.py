from .errors import IntegerConversionError, InvalidBaseRange, InvalidBasesType, InvalidModulus, PrimalityError
from .miller_rabin import (
    MillerRabin,
    Outcome,
    PrimalityFailure,
    PrimalityOptions,
    PrimalityResult,
    check_primality,
    primality_test,
    primality_test_async,
)
from .montgomery import MontgomeryContext
from .primes import is_prime, random_prime

__all__ = [
    'IntegerConversionError',
    'InvalidBaseRange',
    'InvalidBasesType',
    'InvalidModulus',
    'MillerRabin',
    'MontgomeryContext',
    'Outcome',
    'PrimalityError',
    'PrimalityFailure',
    'PrimalityOptions',
    'PrimalityResult',
    'check_primality',
    'is_prime',
    'primality_test',
    'primality_test_async',
    'random_prime',
]
