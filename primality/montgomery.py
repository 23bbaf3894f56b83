from dataclasses import dataclass

from .bits import bit_length
from .errors import InvalidModulus


def invert_power_of_two(exp: int, base: int) -> int:
    """Inverse of 2^exp modulo an odd base."""
    # start from 1 and halve exp times, adding base whenever the value is odd
    inv = 1
    for _ in range(exp):
        if inv & 1:
            inv += base
        inv >>= 1
    return inv


# https://en.wikipedia.org/wiki/Montgomery_modular_multiplication
@dataclass(frozen=True)
class MontgomeryContext:
    base: int
    bit_width: int
    aux_modulus: int  # R = 2^bit_width > base
    aux_modulus_inverse: int  # R^-1 mod base
    base_inverse: int  # base^-1 mod R

    @classmethod
    def create(cls, base: int) -> 'MontgomeryContext':
        if base < 3 or not base & 1:  # noqa: PLR2004
            msg = f'Montgomery modulus must be odd and at least 3, but got: {base}'
            raise InvalidModulus(msg)

        bit_width = bit_length(base)
        aux_modulus = 1 << bit_width
        aux_modulus_inverse = invert_power_of_two(bit_width, base)

        # from base * base_inverse + R * R^-1 = 1 (mod R)
        base_inverse = aux_modulus - ((aux_modulus_inverse * aux_modulus - 1) // base) % aux_modulus
        return cls(base, bit_width, aux_modulus, aux_modulus_inverse, base_inverse)

    def reduce_in(self, x: int) -> int:
        return (x << self.bit_width) % self.base

    def reduce_out(self, x: int) -> int:
        return x * self.aux_modulus_inverse % self.base

    def multiply(self, a: int, b: int) -> int:
        """
        Montgomery product a * b * R^-1 mod base, for a and b in Montgomery form.
        Only masks, shifts and multiplications are used, no division by base.
        """
        if a == 0 or b == 0:
            return 0

        mask = self.aux_modulus - 1
        product = a * b

        t = ((product & mask) * self.base_inverse & mask) * self.base
        # product - t is divisible by R and the quotient lies in (-base, base)
        res = (product - t) >> self.bit_width

        if res >= self.base:
            res -= self.base
        elif res < 0:
            res += self.base
        return res

    def square(self, a: int) -> int:
        return self.multiply(a, a)

    def power(self, a: int, exponent: int) -> int:
        """a is in Montgomery form, exponent is not; the result is in Montgomery form."""
        res = self.reduce_in(1)
        while exponent:
            if exponent & 1:
                res = self.multiply(res, a)

            a = self.square(a)
            exponent >>= 1
        return res
