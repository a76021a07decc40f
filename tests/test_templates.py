from __future__ import annotations

import pytest

from stageforge.config.templates import expand_template
from stageforge.config.types import Task, Template


def _task(values: tuple[str, ...]) -> Task:
    return Task(name="Test", uses="Test", values=values)


def test_expands_in_order():
    template = Template(name="Test", command="X {a} Y {b}", symbols=("{a}", "{b}"))
    out = expand_template(_task(("1", "2")), template)
    assert out.command == "X 1 Y 2"


def test_replaces_every_occurrence():
    template = Template(name="Test", command="{a}-{a}-{a}", symbols=("{a}",))
    out = expand_template(_task(("z",)), template)
    assert out.command == "z-z-z"


def test_later_symbol_sees_text_from_earlier_value():
    template = Template(name="Test", command="X {a} Y {b}", symbols=("{a}", "{b}"))
    out = expand_template(_task(("{b}", "2")), template)
    # The injected "{b}" is rewritten by the second pass, once, and nothing more.
    assert out.command == "X 2 Y 2"


def test_value_containing_its_own_symbol_is_not_rewritten_again():
    template = Template(name="Test", command="echo {a}", symbols=("{a}",))
    out = expand_template(_task(("{a}{a}",)), template)
    assert out.command == "echo {a}{a}"


def test_exactly_one_pass_per_symbol():
    calls: list[tuple[str, str]] = []

    class CountingStr(str):
        def replace(self, old, new, *args):
            calls.append((old, new))
            return CountingStr(str.replace(self, old, new, *args))

    template = Template(
        name="Test", command=CountingStr("{a} {b} {c}"), symbols=("{a}", "{b}", "{c}")
    )
    out = expand_template(_task(("{b}", "{c}", "3")), template)

    assert calls == [("{a}", "{b}"), ("{b}", "{c}"), ("{c}", "3")]
    assert out.command == "3 3 3"


def test_keeps_uses_and_values():
    template = Template(name="Test", command="This is {one} and {two}", symbols=("{one}", "{two}"))
    out = expand_template(_task(("1", "2")), template)
    assert out.command == "This is 1 and 2"
    assert out.uses == "Test"
    assert out.values == ("1", "2")


def test_short_values_raise_index_error():
    template = Template(name="Test", command="{a} {b}", symbols=("{a}", "{b}"))
    with pytest.raises(IndexError):
        expand_template(_task(("1",)), template)
