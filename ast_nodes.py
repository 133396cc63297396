class ASTNode:
    # Optional 1-based source column of the token that created the node.
    column: int | None = None


class Number(ASTNode):
    def __init__(self, value):
        self.value = value  # NumericValue


class BinaryOp(ASTNode):
    def __init__(self, op, lhs, rhs=None):
        self.op = op    # one of + - * / % ^
        self.lhs = lhs
        self.rhs = rhs  # filled in by the parser after the node is spliced


class Group(ASTNode):
    def __init__(self, inner):
        self.inner = inner


class Negate(ASTNode):
    def __init__(self, inner):
        self.inner = inner


ADDITIVE_OPS = ("+", "-")
MULTIPLICATIVE_OPS = ("*", "/", "%")


def is_binary(node, ops):
    return isinstance(node, BinaryOp) and node.op in ops


def _number_text(value):
    if value.is_int:
        return str(value.as_int)
    return repr(value.as_float)


def render(node):
    # Print the tree back as an expression; groups keep their parens, so this is
    # mostly useful to see where the parser grafted each operator.
    # Walks with an explicit stack, a long chain gives a very tall tree.
    parts = []
    stack = [(node, False)]
    while stack:
        current, visited = stack.pop()
        if isinstance(current, Number):
            parts.append(_number_text(current.value))
        elif not visited:
            stack.append((current, True))
            if isinstance(current, BinaryOp):
                stack.append((current.rhs, False))
                stack.append((current.lhs, False))
            elif isinstance(current, (Group, Negate)):
                stack.append((current.inner, False))
            else:
                raise TypeError(f"Unknown node: {current!r}")
        elif isinstance(current, BinaryOp):
            rhs = parts.pop()
            lhs = parts.pop()
            parts.append(f"{lhs}{current.op}{rhs}")
        elif isinstance(current, Group):
            parts.append(f"({parts.pop()})")
        else:
            parts.append(f"-{parts.pop()}")
    return parts.pop()


def to_dict(node):
    if node is None:
        return None

    root = {}
    # (node, dict to fill in); children get empty dicts filled on a later pass
    stack = [(node, root)]
    while stack:
        current, d = stack.pop()
        t = current.__class__.__name__
        d["type"] = t

        if t == "Number":
            d["value"] = current.value.as_int if current.value.is_int else current.value.as_float
            d["exact"] = current.value.is_int
        elif t == "BinaryOp":
            d["op"] = current.op
            d["lhs"] = {}
            d["rhs"] = {}
            stack.append((current.rhs, d["rhs"]))
            stack.append((current.lhs, d["lhs"]))
        elif t in ("Group", "Negate"):
            d["inner"] = {}
            stack.append((current.inner, d["inner"]))
        else:
            d["raw"] = str(current)

    return root
