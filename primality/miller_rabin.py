import asyncio
import logging
import random
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from .bases import (
    DETERMINISM_LIMIT,
    adaptive_rounds,
    deterministic_bases_for,
    random_base,
    to_integer,
    validate_bases,
)
from .bits import bit_length, two_adic_valuation
from .errors import PrimalityError
from .gcd import binary_gcd
from .montgomery import MontgomeryContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrimalityOptions:
    # ignored when bases is given
    num_rounds: int | None = None
    bases: Sequence[object] | None = None
    find_divisor: bool = True
    # exact answer for n < DETERMINISM_LIMIT, overrides bases and num_rounds there
    small_determinism_mode: bool = False
    # source for random bases, seed it to make verdicts reproducible
    rng: random.Random | None = None


@dataclass(frozen=True)
class PrimalityResult:
    n: int
    probable_prime: bool
    witness: int | None = None
    divisor: int | None = None


@dataclass(frozen=True)
class PrimalityFailure:
    n: object
    error: PrimalityError


Outcome = PrimalityResult | PrimalityFailure


# https://en.wikipedia.org/wiki/Miller%E2%80%93Rabin_primality_test
class MillerRabin:
    options: PrimalityOptions

    def __init__(self, options: PrimalityOptions | None = None):
        self.options = options if options is not None else PrimalityOptions()

    def _special_case(self, n: int, sign: int) -> PrimalityResult | None:
        if n < 2:  # noqa: PLR2004
            return PrimalityResult(sign * n, probable_prime=False)
        if n < 4:  # noqa: PLR2004
            return PrimalityResult(sign * n, probable_prime=True)
        if not n & 1:
            return PrimalityResult(sign * n, probable_prime=False, divisor=2)
        return None

    def _requested_bases(self, n: int) -> Sequence[object] | None:
        if self.options.small_determinism_mode and n < DETERMINISM_LIMIT:
            if self.options.bases is not None:
                logger.debug('small determinism mode overrides the supplied bases for n=%d', n)
            return deterministic_bases_for(n)
        return self.options.bases

    def _bases(self, n_bits: int, n_minus_one: int, valid_bases: list[int] | None) -> Iterator[int]:
        if valid_bases is not None:
            yield from valid_bases
            return

        rounds = self.options.num_rounds
        if rounds is None or rounds < 1:
            rounds = adaptive_rounds(n_bits)
        for _ in range(rounds):
            yield random_base(n_bits, n_minus_one, self.options.rng)

    def _divisor_from(self, ctx: MontgomeryContext, x: int) -> int | None:
        if not self.options.find_divisor:
            return None
        divisor = binary_gcd(ctx.reduce_out(x) - 1, ctx.base)
        return divisor if divisor != 1 else None

    def _round(self, ctx: MontgomeryContext, base: int, d: int, r: int, one: int, minus_one: int) -> PrimalityResult | None:
        """
        One strong probable prime check of n = ctx.base for the given base.
        Returns the final result if the base proves n composite, otherwise None.
        """
        n = ctx.base

        # a common factor with n ends the test right away
        if self.options.find_divisor:
            g = binary_gcd(n, base)
            if g != 1:
                return PrimalityResult(n, probable_prime=False, witness=base, divisor=g)

        # base^d = +-1 (mod n)
        x = ctx.power(ctx.reduce_in(base), d)
        if x in (one, minus_one):
            return None

        for _ in range(r):
            y = ctx.square(x)

            # x is a nontrivial square root of 1, so n is composite
            if y == one:
                return PrimalityResult(n, probable_prime=False, witness=base, divisor=self._divisor_from(ctx, x))

            # base^(d * 2^i) = -1 (mod n), n is a strong probable prime to this base
            if y == minus_one:
                return None

            x = y

        # no i satisfied base^(d * 2^i) = +-1 (mod n)
        return PrimalityResult(n, probable_prime=False, witness=base, divisor=self._divisor_from(ctx, x))

    def test(self, value: object) -> PrimalityResult:
        n = to_integer(value)

        # zero is considered positive
        sign = -1 if n < 0 else 1
        n = abs(n)

        special = self._special_case(n, sign)
        if special is not None:
            logger.debug('n=%d resolved without testing rounds', sign * n)
            return special

        n_minus_one = n - 1
        # all validation happens before any Montgomery computation
        valid_bases = validate_bases(self._requested_bases(n), n_minus_one)

        # n - 1 = d * 2^r with d odd
        r = two_adic_valuation(n_minus_one)
        d = n_minus_one >> r

        ctx = MontgomeryContext.create(n)
        one = ctx.reduce_in(1)
        minus_one = ctx.reduce_in(n_minus_one)

        for base in self._bases(bit_length(n), n_minus_one, valid_bases):
            res = self._round(ctx, base, d, r, one, minus_one)
            if res is not None:
                logger.debug('n=%d is composite, witness=%d divisor=%s', n, base, res.divisor)
                return PrimalityResult(sign * n, probable_prime=False, witness=res.witness, divisor=res.divisor)

        return PrimalityResult(sign * n, probable_prime=True)


def primality_test(n: object, options: PrimalityOptions | None = None) -> PrimalityResult:
    return MillerRabin(options).test(n)


def check_primality(n: object, options: PrimalityOptions | None = None) -> Outcome:
    """Same as primality_test, but validation errors are returned instead of raised."""
    try:
        return primality_test(n, options)
    except PrimalityError as e:
        return PrimalityFailure(n, e)


async def primality_test_async(n: object, options: PrimalityOptions | None = None) -> PrimalityResult:
    # the test itself never awaits, so it runs on a worker thread
    return await asyncio.to_thread(primality_test, n, options)
