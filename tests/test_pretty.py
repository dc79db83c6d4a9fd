from rich.console import Console

from errchain import WrappedError, new_from_message, wrap
from errchain.core.pretty import chain_table, print_chain


def _render(err) -> str:
    console = Console(record=True, width=200)
    print_chain(err, console=console)
    return console.export_text()


def test_chain_table_rows():
    root = new_from_message("root cause", {"k": "v"})
    top = wrap(root, ValueError("top"), None)
    table = chain_table(top)
    assert table.row_count == 2


def test_chain_table_includes_plain_terminal():
    top = wrap(ValueError("plain"), ValueError("top"), {"k": "v"})
    assert chain_table(top).row_count == 2


def test_print_chain_output():
    root = new_from_message("root cause", {"k": "v"})
    top = wrap(root, ValueError("top"), None)
    out = _render(top)
    assert "root cause" in out
    assert "map[k:v]" in out
    assert "Stacktrace:" in out
    assert str(root.location) in out


def test_print_chain_plain_error():
    out = _render(ValueError("just plain"))
    assert "just plain" in out
    assert "Stacktrace:" not in out


def test_print_chain_keeps_frames_with_spaces():
    err = WrappedError(
        actual=ValueError("boom"),
        frames=("/work dir/app.py:10", "/work dir/main.py:3"),
    )
    out = _render(err)
    assert "- /work dir/app.py:10" in out
    assert "- /work dir/main.py:3" in out
