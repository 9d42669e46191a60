"""Tests for fixdsl.equality module."""

import pytest

from fixdsl.build import abstract, apply, assign, group, literal, variable
from fixdsl.config import FoldSettings
from fixdsl.equality import same_shape, structural_hash, structurally_equal
from fixdsl.errors import DepthLimitError
from fixdsl.fix import Fix
from fixdsl.syntax import Abstract, Apply, Assign, Group, Literal, Variable


def chain(n: int, leaf: str = "x") -> Fix:
    term = literal(leaf)
    for _ in range(n):
        term = abstract(["x"], term)
    return term


class TestSameShape:
    """Test payload-blind layer comparison."""

    def test_ignores_payload_values(self):
        """Test that differing payloads still share a shape."""
        assert same_shape(Apply(1, (2, 3)), Apply("a", ("b", "c")))

    def test_detects_length_mismatch(self):
        """Test that sequence lengths are part of the shape."""
        assert not same_shape(Group(1, (2,)), Group(1, (2, 3)))

    def test_detects_name_mismatch(self):
        """Test that names are part of the shape."""
        assert not same_shape(Assign("a", 1), Assign("b", 1))

    def test_detects_variant_mismatch(self):
        """Test that variants are part of the shape."""
        assert not same_shape(Variable("x"), Literal("x"))
        assert not same_shape(Abstract((1,), 2), Apply(1, (2,)))


class TestStructurallyEqual:
    """Test lockstep comparison of trees."""

    def test_equal_trees(self):
        """Test equality of independently built trees."""
        build = lambda: group("Block", assign("a", apply(variable("f"), literal("1"))))
        assert structurally_equal(build(), build())

    def test_deep_difference(self):
        """Test that a difference at the bottom is found."""
        assert not structurally_equal(chain(50, "x"), chain(50, "y"))

    def test_different_depths(self):
        """Test trees of different depth."""
        assert not structurally_equal(chain(3), chain(4))

    def test_deep_trees_compare_without_recursion(self):
        """Test comparison far beyond the interpreter recursion limit."""
        assert structurally_equal(chain(5000), chain(5000))
        assert chain(1000) == chain(1000)

    def test_identity_short_circuit(self):
        """Test that a cyclic tree equals itself without descending."""
        term = Fix(lambda: Apply(variable("f"), (term,)))
        assert structurally_equal(term, term)

    def test_depth_limit(self):
        """Test that distinct endless trees are stopped by the depth guard."""

        def loop():
            return Abstract((), Fix(loop))

        with pytest.raises(DepthLimitError):
            structurally_equal(Fix(loop), Fix(loop), settings=FoldSettings(max_depth=30))


class TestStructuralHash:
    """Test the structural hash."""

    def test_equal_trees_equal_hashes(self):
        """Test hash consistency."""
        assert structural_hash(chain(10)) == structural_hash(chain(10))

    def test_variant_in_hash_input(self):
        """Test that variable and literal leaves are distinguished."""
        assert structural_hash(variable("x")) != structural_hash(literal("x"))
