"""The single entry point used by the command line and the REPL.

text -> tokenize -> parse -> evaluate -> NumericValue

Any problem with the input surfaces as a ``CalcError`` subclass (see
``errors.py``); its ``kind`` names what went wrong. The core never prints or
exits; that is left to the caller.
"""

from evaluator import evaluate
from lexer import tokenize
from numeric import NumericValue
from parser import parse


def calculate(text: str, trace: bool = False) -> NumericValue:
    tokens = tokenize(text)
    tree = parse(tokens)
    return evaluate(tree, trace=trace)


def format_number(number: NumericValue) -> str:
    # integers print as-is, everything else with six decimals (like printf's %f)
    if number.is_int:
        return str(number.as_int)
    return f"{number.as_float:.6f}"
