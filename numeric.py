import math

# Width of the integer half of a NumericValue (two's complement).
INT_BITS = 64
INT_MIN = -(1 << (INT_BITS - 1))
INT_MAX = (1 << (INT_BITS - 1)) - 1


def wrap_int(n: int) -> int:
    # fold an unbounded python int into the fixed-width signed range
    n &= (1 << INT_BITS) - 1
    if n > INT_MAX:
        n -= 1 << INT_BITS
    return n


def trunc_divmod(a: int, b: int):
    # C-style division: quotient rounds toward zero, remainder follows the dividend
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    r = a - b * q
    return wrap_int(q), wrap_int(r)


def int_pow(base: int, exp: int) -> int:
    # exp must be >= 0; pow with a modulus keeps huge exponents cheap
    return wrap_int(pow(base, exp, 1 << INT_BITS))


def float_to_int(x: float) -> int:
    if math.isnan(x) or math.isinf(x):
        return 0
    return wrap_int(int(x))


class NumericValue:
    """A number carried both as a fixed-width int and as a double.

    ``is_int`` says which of the two is authoritative. ``as_float`` is always
    filled in, computed on its own rather than converted from ``as_int``, so
    for magnitudes past 2**53 the two can disagree.
    """

    __slots__ = ("is_int", "as_int", "as_float")

    def __init__(self, is_int: bool, as_int: int, as_float: float):
        self.is_int = is_int
        self.as_int = as_int
        self.as_float = as_float

    @classmethod
    def of_int(cls, n: int) -> "NumericValue":
        n = wrap_int(n)
        return cls(True, n, float(n))

    @classmethod
    def of_float(cls, x: float) -> "NumericValue":
        x = float(x)
        return cls(False, float_to_int(x), x)

    def value(self):
        return self.as_int if self.is_int else self.as_float

    def is_zero(self) -> bool:
        if self.is_int:
            return self.as_int == 0
        return self.as_float == 0.0

    def __eq__(self, other):
        if not isinstance(other, NumericValue):
            return NotImplemented
        if self.is_int != other.is_int:
            return False
        if self.is_int:
            return self.as_int == other.as_int
        if math.isnan(self.as_float) and math.isnan(other.as_float):
            return True
        return self.as_float == other.as_float

    def __hash__(self):
        return hash((self.is_int, self.value()))

    def __repr__(self):
        if self.is_int:
            return f"NumericValue(int {self.as_int})"
        return f"NumericValue(float {self.as_float!r})"
