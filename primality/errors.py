class PrimalityError(Exception):
    pass


# Raised when a Montgomery context is built over an even modulus
class InvalidModulus(PrimalityError, ValueError):
    pass


# A caller-supplied base lies outside [2, n - 2]
class InvalidBaseRange(PrimalityError, ValueError):
    pass


# The bases option is neither None nor a sequence
class InvalidBasesType(PrimalityError, TypeError):
    pass


class IntegerConversionError(PrimalityError, ValueError):
    pass
