import math

from errors import UnknownCharacter
from numeric import NumericValue, wrap_int

DIGITS = "0123456789"

SINGLE_CHAR_TOKENS = {
    "+": "PLUS",
    "-": "MINUS",
    "*": "STAR",
    "/": "SLASH",
    "%": "PERCENT",
    "^": "CARET",
    "(": "LPAREN",
    ")": "RPAREN",
}


class Token:
    def __init__(self, type, value=None, column=1):
        self.type = type
        self.value = value
        self.column = column

    def __repr__(self):
        if self.value is not None:
            return f"{self.type}({self.value})"
        return f"{self.type}"


class Lexer:
    def __init__(self, text):
        self.text = text
        self.pos = 0
        self.current_char = text[0] if text else None
        self.column = 1

    def advance(self):
        self.pos += 1
        self.column += 1
        if self.pos >= len(self.text):
            self.current_char = None
        else:
            self.current_char = self.text[self.pos]

    def is_digit(self, ch):
        # str.isdigit() would also accept things like '²'
        return ch is not None and ch in DIGITS

    # only the plain space is insignificant; tabs and newlines are errors
    def skip_whitespace(self):
        while self.current_char == " ":
            self.advance()

    def read_number(self):
        start_col = self.column
        digits = 0
        has_dot = False
        after_dot = 0

        while True:
            digits = digits * 10 + ord(self.current_char) - ord("0")
            if has_dot:
                after_dot += 1
            self.advance()

            if self.current_char == ".":
                # a second dot ends the number and is left for get_next_token
                if has_dot:
                    break
                has_dot = True
                self.advance()

            if not self.is_digit(self.current_char):
                break

        # "3.000" is still the integer 3; only a non-zero fractional digit makes a float.
        # The digit run stays unbounded until here so long literals keep their exactness.
        is_int = True
        as_int = digits
        for _ in range(after_dot):
            as_int, rem = divmod(as_int, 10)
            if rem != 0:
                is_int = False

        try:
            as_float = digits / 10 ** after_dot
        except OverflowError:
            # more integer digits than a double can hold
            as_float = math.inf

        return Token("NUMBER", NumericValue(is_int, wrap_int(as_int), as_float), column=start_col)

    def get_next_token(self):
        while self.current_char is not None:

            if self.current_char == " ":
                self.skip_whitespace()
                continue

            if self.is_digit(self.current_char):
                return self.read_number()

            token_type = SINGLE_CHAR_TOKENS.get(self.current_char)
            if token_type is not None:
                col = self.column
                self.advance()
                return Token(token_type, column=col)

            raise UnknownCharacter(self.current_char, self.column)

        return Token("EOF", column=self.column)

    def tokenize(self):
        tokens = []
        while True:
            tok = self.get_next_token()
            tokens.append(tok)
            if tok.type == "EOF":
                return tokens


def tokenize(text):
    return Lexer(text).tokenize()
