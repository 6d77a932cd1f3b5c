"""Shared fixtures for rimp-core tests."""

from __future__ import annotations

import pytest

from rimp_core import ReversibleVariable, TraceObserver


@pytest.fixture
def x() -> ReversibleVariable:
    """A fresh, silent variable named ``x``."""
    return ReversibleVariable("x")


@pytest.fixture
def trace_lines() -> list[str]:
    """Line sink collecting trace output."""
    return []


@pytest.fixture
def traced(trace_lines: list[str]) -> ReversibleVariable:
    """Variable ``t`` whose trace lines land in ``trace_lines``."""
    return ReversibleVariable("t", observers=[TraceObserver(trace_lines.append)])
