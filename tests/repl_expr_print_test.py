import os
import subprocess
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def run_cli(args, inp=None):
    cli = os.path.join(ROOT, "cli.py")
    return subprocess.run(
        [sys.executable, cli, "--no-color", *args],
        input=inp,
        text=True,
        capture_output=True,
        cwd=ROOT,
        timeout=10,
    )


def run_repl_with_input(inp: str) -> subprocess.CompletedProcess:
    proc = run_cli(["repl"], inp)

    # REPL should exit cleanly after :q
    if proc.returncode != 0:
        raise AssertionError(f"REPL exited with code {proc.returncode}\nSTDOUT:\n{proc.stdout}\nSTDERR:\n{proc.stderr}")

    return proc


def test_auto_print_expression():
    out = run_repl_with_input("1 + 2\n:q\n").stdout
    if "3" not in out:
        raise AssertionError(f"Expected 3 in output.\nOUT:\n{out}")


def test_repl_continues_after_error():
    proc = run_repl_with_input("1/0\n2*3\n:q\n")
    if "DivisionByZero" not in proc.stderr:
        raise AssertionError(f"Expected DivisionByZero on stderr.\nERR:\n{proc.stderr}")
    if "6" not in proc.stdout:
        raise AssertionError(f"Expected 6 after the error.\nOUT:\n{proc.stdout}")


def test_repl_exits_on_eof():
    out = run_repl_with_input("7/2\n").stdout
    if "3.500000" not in out:
        raise AssertionError(f"Expected 3.500000 in output.\nOUT:\n{out}")


def test_one_shot_prints_result():
    proc = run_cli(["(1+2)*3"])
    assert proc.returncode == 0
    assert proc.stdout == "9\n"


def test_one_shot_float_uses_six_decimals():
    proc = run_cli(["2^0.5"])
    assert proc.returncode == 0
    assert proc.stdout == "1.414214\n"


def test_one_shot_error_exits_nonzero():
    proc = run_cli(["(1+2"])
    assert proc.returncode == 1
    assert "UnmatchedOpenParen" in proc.stderr
    assert proc.stdout == ""


def test_no_arguments_prints_usage():
    proc = run_cli([])
    assert proc.returncode == 0
    assert "Usage:" in proc.stdout


def test_too_many_arguments():
    proc = run_cli(["1+1", "2+2"])
    assert proc.returncode == 1
    assert "too many parameters" in proc.stderr


def test_parse_command_dumps_tree():
    proc = run_cli(["parse", "1+2*3"])
    assert proc.returncode == 0
    assert "type: BinaryOp" in proc.stdout
    assert "op: *" in proc.stdout
    assert "RENDERED: 1+2*3" in proc.stdout


def test_trace_flag_prints_steps():
    proc = run_cli(["--trace", "1+2"])
    assert proc.returncode == 0
    lines = proc.stdout.splitlines()
    assert lines[-1] == "3"
    assert any(line.startswith("TRACE 1+2 =>") for line in lines)


def test_one_shot_long_chain():
    proc = run_cli(["1" + "+1" * 4999])
    assert proc.returncode == 0
    assert proc.stdout == "5000\n"


def test_parse_command_long_chain():
    proc = run_cli(["parse", "1" + "*2" * 1200])
    assert proc.returncode == 0
    assert proc.stdout.count("type: BinaryOp") == 1200


def test_long_literal_in_repl():
    out = run_repl_with_input("0." + "0" * 400 + "1+1\n:q\n").stdout
    if "1.000000" not in out:
        raise AssertionError(f"Expected 1.000000 in output.\nOUT:\n{out}")


def test_pretty_nests_by_indent():
    from cli import pretty

    assert pretty({"type": "Negate", "inner": {"type": "Number", "value": 4}}) == (
        "type: Negate\ninner:\n  type: Number\n  value: 4"
    )


if __name__ == "__main__":
    test_auto_print_expression()
    test_repl_continues_after_error()
    print("ok")
