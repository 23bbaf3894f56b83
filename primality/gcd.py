# https://en.wikipedia.org/wiki/Binary_GCD_algorithm
def binary_gcd(a: int, b: int) -> int:
    if a == b:
        return a
    if a == 0:
        return b
    if b == 0:
        return a

    # shared factors of two are re-added at the end
    shared = 0
    while not (a | b) & 1:
        shared += 1
        a >>= 1
        b >>= 1

    while a != b and b > 1:
        # remaining factors of two do not affect the gcd
        while not a & 1:
            a >>= 1
        while not b & 1:
            b >>= 1

        # keep a > b, subtraction instead of division
        if b > a:
            a, b = b, a
        elif a == b:
            break

        a -= b

    return b << shared
