import io

import pytest

from shrubvm.cli import build_demo, main

COUNT_HEADER = "COUNT TO 20: "
FIB_HEADER = "FIBONACCI SEQUENCE: "


def run_demo():
    out = io.StringIO()
    vm = build_demo(out)
    vm.run()
    return vm, out.getvalue()


def split_sections(text):
    lines = text.split("\n")
    count_at = lines.index(COUNT_HEADER)
    fib_at = lines.index(FIB_HEADER)
    count = [line for line in lines[count_at + 1:fib_at] if line]
    fib = [line for line in lines[fib_at + 1:] if line]
    return count, fib


def test_demo_counts_to_twenty():
    _, text = run_demo()
    count, _ = split_sections(text)
    assert [float(line) for line in count] == [float(n) for n in range(21)]


def test_demo_fibonacci_invariant():
    _, text = run_demo()
    _, fib = split_sections(text)
    values = [float(line) for line in fib]
    assert len(values) == 20
    assert values[0] == values[1] == 1.0
    assert all(values[i] == values[i - 1] + values[i - 2] for i in range(2, len(values)))


def test_demo_headers_come_first_in_order():
    _, text = run_demo()
    assert text.startswith("\n" + COUNT_HEADER + "\n")
    assert text.index(COUNT_HEADER) < text.index(FIB_HEADER)


def test_demo_leaves_machine_clean():
    vm, _ = run_demo()
    assert len(vm.stack) == 0
    assert len(vm.environment) == 0


def test_main_prints_and_succeeds(capsys):
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert COUNT_HEADER in captured
    assert captured.endswith("\n\n")


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2