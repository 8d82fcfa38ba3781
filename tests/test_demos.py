import io
import re

import pytest

from bintrees_kit.demos import main, run_demo
from bintrees_kit.node import Node
from bintrees_kit.printer import render


def _output(number):
    buffer = io.StringIO()
    run_demo(number, buffer)
    return buffer.getvalue()


def _trailing_numbers(number):
    lines = [line for line in _output(number).splitlines() if line.strip()]
    return [int(line) for line in lines if re.fullmatch(r"-?\d+", line)]


def _measures(number):
    return {
        int(m.group(1)): int(m.group(2))
        for m in re.finditer(r"(\d+): (\d+)\n", _output(number))
    }


@pytest.mark.parametrize("number", range(19))
def test_every_demo_starts_with_root(number):
    assert _output(number).startswith("(098)")


def test_demo_zero_is_rendering_of_its_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.left.left = Node(6, root.left)
    root.left.right = Node(16, root.left)
    root.right = Node(402, root)
    root.right.left = Node(256, root.right)
    root.right.right = Node(512, root.right)
    assert _output(0) == render(root)


def test_insert_right_demo_ends_with_delete_demo_tree():
    assert _output(2).endswith("\n" + _output(3))


def test_insert_left_demo_starts_with_base_tree():
    base = Node(98)
    base.left = Node(12, base)
    base.right = Node(402, base)
    assert _output(1).startswith(render(base) + "\n")


def test_inorder_demo_is_sorted():
    values = _trailing_numbers(7)
    assert len(values) == 7
    assert values == sorted(values)


def test_traversals_visit_same_values():
    pre, ino, post = (_trailing_numbers(n) for n in (6, 7, 8))
    assert sorted(pre) == sorted(ino) == sorted(post)
    assert pre[0] == 98
    assert post[-1] == 98


def test_size_is_leaves_plus_internal_nodes():
    sizes, leaves, internal = _measures(11), _measures(12), _measures(13)
    assert sizes.keys() == leaves.keys() == internal.keys()
    for value, size in sizes.items():
        assert size == leaves[value] + internal[value]


def test_depth_demo_root():
    assert "Depth of 98: 0\n" in _output(10)


def test_sibling_demo():
    output = _output(17)
    assert "Sibling of 12: 128\n" in output
    assert output.splitlines()[-1].endswith("(nil)")


def test_uncle_demo_missing_uncle_matches_sibling_missing_text():
    uncle_last = _output(18).splitlines()[-1]
    sibling_last = _output(17).splitlines()[-1]
    assert uncle_last.split(": ")[1] == sibling_last.split(": ")[1]


def test_balance_lines_are_signed():
    lines = [line for line in _output(14).splitlines() if line.startswith("Balance")]
    assert len(lines) == 3
    assert all(re.search(r": [+-]\d+$", line) for line in lines)


def test_perfect_demo_reports_three_times():
    lines = [line for line in _output(16).splitlines() if line.startswith("Perfect")]
    assert len(lines) == 3
    assert lines[1] == lines[2]


def test_unknown_demo_raises():
    with pytest.raises(ValueError):
        run_demo(19, io.StringIO())


def test_main_prints_demo(capsys):
    assert main(["5"]) == 0
    assert capsys.readouterr().out == _output(5)


def test_main_runs_several(capsys):
    assert main(["4", "9"]) == 0
    assert capsys.readouterr().out == _output(4) + _output(9)


def test_main_rejects_unknown_number():
    with pytest.raises(SystemExit):
        main(["99"])