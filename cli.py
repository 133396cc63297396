import sys
import traceback

import colorama

from ast_nodes import render, to_dict
from calculator import calculate, format_number
from errors import CalcError
from lexer import Lexer
from parser import Parser

PROMPT = "calc> "
QUIT_COMMANDS = (":q", ":quit", "quit", "exit")

USAGE = [
    "Usage:",
    '  calc "<expression>"',
    '  calc parse "<expression>"',
    "  calc repl",
    "  (optional) --debug to show Python traceback",
    "  (optional) --trace to print every evaluation step",
    "  (optional) --no-color to disable colored errors",
    'example: calc "1+2*(7.5*2)"',
]


class Options:
    def __init__(self, debug=False, trace=False, color=True):
        self.debug = debug
        self.trace = trace
        self.color = color


def pretty(tree):
    # tree is a to_dict() result: nested dicts only, possibly thousands deep
    lines = []
    stack = [(iter(tree.items()), 0)]
    while stack:
        items, indent = stack[-1]
        entry = next(items, None)
        if entry is None:
            stack.pop()
            continue
        key, value = entry
        sp = "  " * indent
        if isinstance(value, dict):
            lines.append(f"{sp}{key}:")
            stack.append((iter(value.items()), indent + 1))
        else:
            lines.append(f"{sp}{key}: {value}")
    return "\n".join(lines)


def report_error(err, opts):
    if opts.debug:
        traceback.print_exc()
        return
    text = f"Error ({err.kind}): {err}"
    if opts.color:
        text = f"{colorama.Fore.RED}{text}{colorama.Style.RESET_ALL}"
    print(text, file=sys.stderr)


def cmd_eval(expression, opts):
    try:
        result = calculate(expression, trace=opts.trace)
    except CalcError as e:
        report_error(e, opts)
        sys.exit(1)
    print(format_number(result))


def cmd_parse(expression, opts):
    try:
        tokens = Lexer(expression).tokenize()
        tree = Parser(tokens).parse()
    except CalcError as e:
        report_error(e, opts)
        sys.exit(1)

    print(pretty(to_dict(tree)))
    print(f"\nRENDERED: {render(tree)}")


def cmd_repl(opts):
    print("calc REPL. Type :q to quit.")

    while True:
        try:
            line = input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            break

        stripped = line.strip()
        if stripped in QUIT_COMMANDS:
            break
        if not stripped:
            continue

        try:
            result = calculate(stripped, trace=opts.trace)
        except CalcError as e:
            report_error(e, opts)
            continue
        print(format_number(result))


def parse_flags(argv):
    opts = Options()
    rest = []
    for arg in argv:
        if arg == "--debug":
            opts.debug = True
        elif arg == "--trace":
            opts.trace = True
        elif arg == "--no-color":
            opts.color = False
        else:
            rest.append(arg)
    return opts, rest


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    opts, args = parse_flags(argv)

    if opts.color:
        colorama.just_fix_windows_console()

    if not args:
        print("\n".join(USAGE))
        return

    cmd = args[0]

    if cmd == "repl":
        if len(args) != 1:
            print("repl does not accept extra arguments.", file=sys.stderr)
            sys.exit(1)
        cmd_repl(opts)
        return

    if cmd == "parse":
        if len(args) != 2:
            print('Usage: calc parse "<expression>"', file=sys.stderr)
            sys.exit(1)
        cmd_parse(args[1], opts)
        return

    if len(args) > 1:
        print("too many parameters to the program!", file=sys.stderr)
        sys.exit(1)
    cmd_eval(cmd, opts)


if __name__ == "__main__":
    main()
