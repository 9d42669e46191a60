"""Tests for the runnable examples."""

import importlib.util
from pathlib import Path

import pytest

from fixdsl.build import abstract, apply, literal, variable
from fixdsl.fold import cata

EXAMPLES = Path(__file__).resolve().parent.parent / "examples"


@pytest.fixture(scope="module")
def rendering():
    """Load examples/01_rendering.py as a module."""
    spec = importlib.util.spec_from_file_location("rendering_example", EXAMPLES / "01_rendering.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestRenderingExample:
    """Test the rendering walkthrough."""

    def test_main_runs(self, rendering, capsys):
        """Test that every example step completes."""
        rendering.main()
        assert "All examples completed successfully!" in capsys.readouterr().out

    def test_free_variables(self, rendering):
        """Test the free-variable algebra on a small tree."""
        term = apply(abstract(["x"], apply(variable("g"), variable("x"))), literal("1"))
        assert cata(rendering.free_variables)(term) == {"g"}

    def test_free_variables_rejects_unknown_layer(self, rendering):
        """Test that a non-variant layer fails the exhaustiveness check."""
        with pytest.raises(AssertionError):
            rendering.free_variables(object())
