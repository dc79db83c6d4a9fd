import sys

from errchain import GenericError, find_error, find_error_by_prefix, find_generic_error, new_from_error, wrap


DEPTH = sys.getrecursionlimit() + 50


def _deep_chain(root_actual):
    root = new_from_error(root_actual, {"level": 0, "shared": "root"})
    node = root
    for i in range(1, DEPTH + 1):
        node = wrap(node, ValueError(f"wrap {i}"), {"level": i, "shared": "leaf"})
    return root, node


def test_render_deep_chain():
    root, top = _deep_chain(ValueError("root"))
    out = top.render()
    assert out.startswith(f"Message: wrap {DEPTH}. ")
    assert out.count(" <br> ") == DEPTH
    assert str(top) == out


def test_collect_all_fields_deep_chain():
    _, top = _deep_chain(ValueError("root"))
    assert top.collect_all_fields() == {"level": 0, "shared": "root"}


def test_stacktrace_deep_chain():
    root, top = _deep_chain(ValueError("root"))
    assert top.root() is root
    assert top.stacktrace() == root.stacktrace()
    assert top.stacktrace() != ""


def test_lookups_deep_chain():
    ge = GenericError()
    root, top = _deep_chain(ge)
    found, fields, ok = find_generic_error(top)
    assert ok
    assert found is ge
    assert fields == {"level": 0, "shared": "root"}

    found, fields, ok = find_error(ge, top)
    assert ok
    assert fields == {"level": 0, "shared": "root"}

    found, fields, ok = find_error_by_prefix("Generic", top)
    assert ok
    assert str(found) == "GenericError"
    assert fields == {"level": 0, "shared": "root"}
