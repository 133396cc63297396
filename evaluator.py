import math

from ast_nodes import Number, BinaryOp, Group, Negate, render
from errors import DivisionByZero
from numeric import NumericValue, float_to_int, int_pow, trunc_divmod, wrap_int


# Float helpers: the float half follows IEEE results (inf/nan) instead of
# letting python raise on them.
def _float_div(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _float_mod(a: float, b: float) -> float:
    if b == 0.0 or math.isinf(a) or math.isnan(a) or math.isnan(b):
        return math.nan
    return math.fmod(a, b)


def _odd_integer(b: float) -> bool:
    return b.is_integer() and math.fmod(b, 2.0) != 0.0


def _float_pow(a: float, b: float) -> float:
    try:
        return math.pow(a, b)
    except OverflowError:
        # only odd integral exponents keep the sign of a negative base
        if a < 0 and _odd_integer(b):
            return -math.inf
        return math.inf
    except ValueError:
        # 0 raised to a negative power, or a negative base with a fractional exponent
        if a == 0.0:
            if _odd_integer(b):
                return math.copysign(math.inf, a)
            return math.inf
        return math.nan


class Evaluator:
    def __init__(self, trace: bool = False):
        self.trace_enabled = trace

    def eval(self, node) -> NumericValue:
        # Post-order walk on an explicit stack: flat chains like 1+1+...+1 build
        # a left-deep tree as tall as the expression is long.
        results = []
        stack = [(node, False)]
        while stack:
            current, visited = stack.pop()

            if isinstance(current, Number):
                res = current.value
            elif not visited:
                stack.append((current, True))
                if isinstance(current, BinaryOp):
                    stack.append((current.rhs, False))
                    stack.append((current.lhs, False))
                elif isinstance(current, (Group, Negate)):
                    stack.append((current.inner, False))
                else:
                    raise TypeError(f"Unknown node: {current!r}")
                continue
            elif isinstance(current, BinaryOp):
                rhs = results.pop()
                lhs = results.pop()
                res = self.binary(current, lhs, rhs)
            elif isinstance(current, Group):
                res = results.pop()
            else:
                inner = results.pop()
                res = NumericValue(inner.is_int, wrap_int(-inner.as_int), -inner.as_float)

            if self.trace_enabled:
                print(f"TRACE {render(current)} => {res!r}")
            results.append(res)

        return results.pop()

    def binary(self, node, lhs: NumericValue, rhs: NumericValue) -> NumericValue:
        op = node.op
        both_int = lhs.is_int and rhs.is_int

        if op == "+":
            return self._exact_or_float(both_int, lhs.as_int + rhs.as_int, lhs.as_float + rhs.as_float)
        if op == "-":
            return self._exact_or_float(both_int, lhs.as_int - rhs.as_int, lhs.as_float - rhs.as_float)
        if op == "*":
            return self._exact_or_float(both_int, lhs.as_int * rhs.as_int, lhs.as_float * rhs.as_float)

        if op == "/":
            if rhs.is_zero():
                raise DivisionByZero(node.column)
            as_float = _float_div(lhs.as_float, rhs.as_float)
            if both_int:
                quot, rem = trunc_divmod(lhs.as_int, rhs.as_int)
                return NumericValue(rem == 0, quot, as_float)
            return NumericValue(False, float_to_int(as_float), as_float)

        if op == "%":
            if rhs.is_zero():
                raise DivisionByZero(node.column)
            as_float = _float_mod(lhs.as_float, rhs.as_float)
            if both_int:
                _, rem = trunc_divmod(lhs.as_int, rhs.as_int)
                return NumericValue(True, rem, as_float)
            return NumericValue(False, float_to_int(as_float), as_float)

        if op == "^":
            if lhs.is_zero() and rhs.as_float < 0:
                raise DivisionByZero(node.column)
            as_float = _float_pow(lhs.as_float, rhs.as_float)
            if both_int and rhs.as_int >= 0:
                return NumericValue(True, int_pow(lhs.as_int, rhs.as_int), as_float)
            return NumericValue(False, float_to_int(as_float), as_float)

        raise ValueError(f"Unknown binary op: {op}")

    def _exact_or_float(self, both_int: bool, as_int: int, as_float: float) -> NumericValue:
        # the float half is never derived from the int half
        if both_int:
            return NumericValue(True, wrap_int(as_int), as_float)
        return NumericValue(False, float_to_int(as_float), as_float)


def evaluate(node, trace: bool = False) -> NumericValue:
    return Evaluator(trace=trace).eval(node)
