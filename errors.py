class CalcError(Exception):
    kind = "CalcError"

    def __init__(self, message: str, column: int | None = None):
        super().__init__(message)
        self.message = message
        self.column = column

    def __str__(self) -> str:
        if self.column is None:
            return self.message
        return f"{self.message} at col {self.column}"


class LexError(CalcError):
    kind = "LexError"


class UnknownCharacter(LexError):
    kind = "UnknownCharacter"

    def __init__(self, char: str, column: int | None = None):
        super().__init__(f"Unknown character: {char!r}", column)
        self.char = char


class ParseError(CalcError):
    kind = "ParseError"


class LeadingNonValue(ParseError):
    kind = "LeadingNonValue"

    def __init__(self, column: int | None = None):
        super().__init__("Can't start an expression with a non-number", column)


class MissingOperator(ParseError):
    kind = "MissingOperator"

    def __init__(self, column: int | None = None):
        super().__init__("No operator between expressions", column)


class MissingOperand(ParseError):
    kind = "MissingOperand"

    def __init__(self, column: int | None = None):
        super().__init__("Operator is missing its right-hand value", column)


class UnmatchedOpenParen(ParseError):
    kind = "UnmatchedOpenParen"

    def __init__(self, column: int | None = None):
        super().__init__("Unmatched '('", column)


class UnmatchedCloseParen(ParseError):
    kind = "UnmatchedCloseParen"

    def __init__(self, column: int | None = None):
        super().__init__("Unmatched ')'", column)


class EvalError(CalcError):
    kind = "EvalError"


class DivisionByZero(EvalError):
    kind = "DivisionByZero"

    def __init__(self, column: int | None = None):
        super().__init__("Division by zero", column)
