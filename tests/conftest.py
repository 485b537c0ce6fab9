"""Shared pytest fixtures and test helpers for optionkit tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from typing import Any

import pytest
from click.testing import CliRunner


class Recorder:
    """Callable that records every call and returns a fixed value."""

    def __init__(self, returns: Any = None) -> None:
        self.returns = returns
        self.calls: list[tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.returns

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def recorder() -> Callable[..., Recorder]:
    """Factory for call-recording callables (predicates, consumers, suppliers)."""
    return Recorder


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host OPTIONKIT_* variables out of settings under test."""
    for name in ("JSON_OUTPUT", "QUIET", "VERBOSE", "LOG_JSON", "DEFAULT_FALLBACK"):
        monkeypatch.delenv(f"OPTIONKIT_{name}", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test (the CLI reconfigures it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("optionkit")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
