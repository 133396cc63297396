from ast_nodes import (
    Number, BinaryOp, Group, Negate,
    ADDITIVE_OPS, MULTIPLICATIVE_OPS, is_binary,
)
from errors import (
    LeadingNonValue, MissingOperator, MissingOperand,
    UnmatchedOpenParen, UnmatchedCloseParen,
)

OPERATOR_TOKENS = {
    "PLUS": "+",
    "MINUS": "-",
    "STAR": "*",
    "SLASH": "/",
    "PERCENT": "%",
    "CARET": "^",
}


class Parser:
    """Builds the expression tree without a grammar table.

    Everything parsed so far at the current nesting level hangs off
    ``self.root``. Each operator is spliced into that tree at the spot its
    precedence calls for, and its right operand is always a single value;
    there is no recursion per precedence level.
    """

    def __init__(self, tokens):
        self.tokens = tokens
        self.pos = 0
        self.current_token = tokens[0]
        self.root = None

    def advance(self):
        if self.current_token.type != "EOF":
            self.pos += 1
            self.current_token = self.tokens[self.pos]

    def retreat(self):
        self.pos -= 1
        self.current_token = self.tokens[self.pos]

    # ---------- TOP LEVEL ----------
    def parse(self):
        self.root = self.parse_value()
        if self.root is None:
            raise LeadingNonValue(self.current_token.column)

        while self.current_token.type != "EOF":
            self.parse_operator()

        return self.root

    # value -> [-] (NUMBER | '(' expression ')')
    def parse_value(self):
        negative = False
        minus_tok = self.current_token
        if self.current_token.type == "MINUS":
            self.advance()
            negative = True

        tok = self.current_token
        if tok.type == "NUMBER":
            node = Number(tok.value)
            node.column = tok.column
            self.advance()
        elif tok.type == "LPAREN":
            outer = self.root
            self.root = None
            self.advance()

            self.root = self.parse_value()
            if self.root is None:
                raise LeadingNonValue(self.current_token.column)

            while self.current_token.type != "RPAREN":
                if self.current_token.type == "EOF":
                    raise UnmatchedOpenParen(tok.column)
                self.parse_operator()

            self.advance()  # ')'
            node = Group(self.root)
            node.column = tok.column
            self.root = outer
        else:
            # give the '-' back so the caller reports the right token
            if negative:
                self.retreat()
            return None

        if negative:
            node = Negate(node)
            node.column = minus_tok.column
        return node

    def parse_operator(self):
        tok = self.current_token

        if tok.type in ("NUMBER", "LPAREN"):
            raise MissingOperator(tok.column)
        if tok.type == "RPAREN":
            raise UnmatchedCloseParen(tok.column)

        op = OPERATOR_TOKENS[tok.type]
        root = self.root
        # where the new node goes: the whole root, or the rhs slot of `parent`
        parent = None

        if op in MULTIPLICATIVE_OPS:
            if is_binary(root, ADDITIVE_OPS):
                parent = root
        elif op == "^":
            if is_binary(root, ADDITIVE_OPS):
                # apply the same rule one level down, inside the additive rhs
                self.root = root.rhs
                self.parse_operator()
                root.rhs = self.root
                self.root = root
                return
            if is_binary(root, MULTIPLICATIVE_OPS):
                parent = root

        self.advance()
        lhs = parent.rhs if parent is not None else root
        node = BinaryOp(op, lhs)
        node.column = tok.column

        node.rhs = self.parse_value()
        if node.rhs is None:
            raise MissingOperand(self.current_token.column)

        if parent is not None:
            parent.rhs = node
        else:
            self.root = node


def parse(tokens):
    return Parser(tokens).parse()
