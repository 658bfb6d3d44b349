import os
from pathlib import Path

import pytest

from mclisp.config import (
    flag_from_env,
    get_prelude_files,
    get_recursion_limit,
    paths_from_env,
    trace_enabled,
)


def test_paths_from_env_defaults(monkeypatch):
    monkeypatch.delenv("MCLISP_TEST_PATHS", raising=False)
    assert paths_from_env("MCLISP_TEST_PATHS", ["a", "b"]) == [Path("a"), Path("b")]


def test_paths_from_env_splits(monkeypatch):
    monkeypatch.setenv("MCLISP_TEST_PATHS", os.pathsep.join(["x", " ", "y "]))
    assert paths_from_env("MCLISP_TEST_PATHS", []) == [Path("x"), Path("y")]


def test_prelude_files(monkeypatch):
    monkeypatch.delenv("MCLISP_PRELUDE_PATH", raising=False)
    assert get_prelude_files() == []
    monkeypatch.setenv("MCLISP_PRELUDE_PATH", "lib.lisp")
    assert get_prelude_files() == [Path("lib.lisp")]


def test_flags(monkeypatch):
    monkeypatch.delenv("MCLISP_TRACE", raising=False)
    assert trace_enabled() is False
    assert flag_from_env("MCLISP_TRACE", default=True) is True
    for value in ("1", "true", "YES", " on "):
        monkeypatch.setenv("MCLISP_TRACE", value)
        assert trace_enabled() is True
    monkeypatch.setenv("MCLISP_TRACE", "0")
    assert trace_enabled() is False


def test_recursion_limit(monkeypatch):
    monkeypatch.delenv("MCLISP_RECURSION_LIMIT", raising=False)
    assert get_recursion_limit() is None
    monkeypatch.setenv("MCLISP_RECURSION_LIMIT", " 5000 ")
    assert get_recursion_limit() == 5000
    monkeypatch.setenv("MCLISP_RECURSION_LIMIT", "deep")
    with pytest.raises(ValueError):
        get_recursion_limit()
