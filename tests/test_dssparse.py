"""
# Command-line parsing, end to end
"""

from textwrap import dedent

import pytest

import dssparse
from dssparse import (
    parse_line,
    iter_params,
    Param,
    Tokenizer,
    TokenizerOptions,
    VariableTable,
    ValueReader,
    ErrorMode,
)


def test_parse_line():
    table = VariableTable()
    table.add("@load", "LoadBus")
    line = "New Line.L1 bus1=SourceBus.1.2.3 bus2=@load phases=3 length=(0.5 2 *) units=km ! feeder"
    assert parse_line(line, resolver=table) == [
        Param("", "New"),
        Param("", "Line.L1"),
        Param("bus1", "SourceBus.1.2.3"),
        Param("bus2", "LoadBus"),
        Param("phases", "3"),
        Param("length", "0.5 2 *", quoted=True),
        Param("units", "km"),
    ]


def test_parse_line_empty():
    assert parse_line("") == []
    assert parse_line("   ") == []
    assert parse_line("// nothing but a comment") == []


def test_iter_params_options():
    opts = TokenizerOptions(comment_char="#", delimiters=",=:")
    params = list(iter_params("a:1 b=2 # c=3", options=opts))
    # Separators other than `=` split positional values, rather than naming them
    assert [(p.name, p.value) for p in params] == [("", "a"), ("", "1"), ("b", "2")]


def test_script():
    """Process a small script, one line at a time, with a single session."""
    script = dedent(
        """\
        Set %kv=12.47
        New Transformer.T1 buses=[@src @dest.1] kvs=[115 @kv]
        New Load.L1 bus1=@dest.1 kw=(100 1.05 *) pf=0.95 ! nominal
        """
    )

    table = VariableTable()
    table.add("@src", "Sub")
    table.add("@dest", "Feeder")
    table.add("@kv", "12.47")
    tokenizer = Tokenizer(resolver=table)
    reader = ValueReader(tokenizer)

    results = {}
    for line in script.splitlines():
        tokenizer.set_cmd_string(line)
        tokenizer.next_param()  # The command verb
        while True:
            name = tokenizer.next_param()
            if not name:
                if not tokenizer.token:
                    break
                continue
            if name == "kw":
                results[name] = reader.make_double()
            elif name == "bus1":
                results[name] = reader.parse_as_bus_name()
            else:
                results[name] = reader.make_string()

    # Substitution only applies to whole tokens, not to words inside quoted spans
    assert results["buses"] == "@src @dest.1"
    assert results["kvs"] == "115 @kv"
    assert results["bus1"] == ("Feeder", [1])
    assert results["kw"] == pytest.approx(105.0)
    assert results["pf"] == "0.95"
    assert "nominal" not in results


def test_parse_line_empty_values():
    table = VariableTable()
    table.add("@e", "")
    assert parse_line("a,,") == [Param("", "a"), Param("", "")]
    assert parse_line("x @e ! done", resolver=table) == [Param("", "x"), Param("", "")]


def test_sessions_are_independent():
    a, b = VariableTable(), VariableTable()
    a.add("@x", "1")
    b.add("@x", "2")
    assert parse_line("@x", resolver=a) == [Param("", "1")]
    assert parse_line("@x", resolver=b) == [Param("", "2")]


def test_store_mode_collects_errors():
    t = Tokenizer()
    t.set_cmd_string("kw=oops kvar=(1 2 bogus)")
    r = ValueReader(t, errormode=ErrorMode.STORE)
    with pytest.warns(UserWarning):
        t.next_param()
        assert r.make_double() == 0.0
        t.next_param()
        assert r.make_double() == 0.0
    assert [text for text, _ in r.errors] == ["oops", "bogus"]


def test_exports():
    for name in ("Tokenizer", "VariableTable", "RegisterStack", "ValueReader", "parse_line"):
        assert hasattr(dssparse, name)
