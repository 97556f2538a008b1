"""
Tests for the smart constructors.
"""

import math

import numpy as np
import pytest

from symbolic_expressions.expression_tree import (
    AdditionNode,
    ConstantNode,
    DivideNode,
    InvalidExpressionError,
    MultiplyNode,
    NegNode,
    NodeType,
    PowNode,
    SubtractNode,
    VariableNode,
    evaluate_expression,
    format_expression,
)
from symbolic_expressions.expression_tree.builder import (
    add,
    c,
    constant,
    div,
    divide,
    mul,
    multiply,
    neg,
    negate,
    pow,
    sub,
    subtract,
    v,
    variable,
)
from symbolic_expressions.logging_system import LogLevel, configure_logging


class TestLeaves:
    def test_constant_stores_float(self):
        node = constant(3)
        assert isinstance(node, ConstantNode)
        assert isinstance(node.value, float)
        assert node.value == 3.0

    def test_constant_accepts_numpy_scalar(self):
        assert constant(np.float32(0.5)).value == 0.5

    def test_constant_accepts_non_finite(self):
        assert math.isnan(constant(float("nan")).value)
        assert constant(float("inf")).value == math.inf

    def test_variable_accepts_any_text(self):
        for name in ("x", "", "two words", "1+2"):
            node = variable(name)
            assert isinstance(node, VariableNode)
            assert node.name == name

    def test_aliases(self):
        assert c(2) == constant(2)
        assert v("x") == variable("x")


class TestAddFlattening:
    def test_nested_addition_is_spliced(self):
        a, b, z = v("a"), v("b"), v("z")
        nested = add([add([a, b]), z])
        flat = add([a, b, z])
        assert nested == flat
        assert format_expression(nested) == "a + b + z"
        assert all(t.node_type != NodeType.ADDITION for t in nested.terms)

    def test_flattening_is_one_level(self):
        inner = AdditionNode([v("a"), AdditionNode([v("b"), v("c")])])
        result = add([inner, v("d")])
        assert result.terms[1].node_type == NodeType.ADDITION
        assert format_expression(result) == "a + b + c + d"

    def test_spliced_constants_are_not_refolded(self):
        # the inner sum already holds its own folded constant
        nested = add([add([c(1), v("x")]), c(2)])
        assert format_expression(nested) == "2 + 1 + x"
        assert format_expression(add([c(1), v("x"), c(2)])) == "3 + x"

    def test_flattened_sums_evaluate_equal(self):
        nested = add([add([c(1), c(4)]), c(2), mul([c(2), c(3)])])
        flat = add([c(1), c(4), c(2), mul([c(2), c(3)])])
        assert evaluate_expression(nested) == evaluate_expression(flat) == 13.0


class TestAddConstantFolding:
    def test_constants_fold_to_leading_term(self):
        x = v("x")
        folded = add([c(3), c(4), x])
        assert folded == add([c(7), x])
        assert folded.terms[0] == c(7)

    def test_constant_anywhere_moves_to_front(self):
        result = add([v("x"), c(2), v("y"), c(5)])
        assert format_expression(result) == "7 + x + y"

    def test_zero_is_elided(self):
        x = v("x")
        assert add([c(0), x]) is x
        assert format_expression(add([c(0), x])) == format_expression(x)

    def test_negative_zero_is_elided(self):
        x = v("x")
        assert add([c(-0.0), x]) is x

    def test_cancelling_constants_disappear(self):
        x, y = v("x"), v("y")
        assert add([c(2), x, c(-2), y]) == AdditionNode([x, y])

    def test_all_zero_collapses_to_zero_constant(self):
        assert add([c(0), c(0)]) == ConstantNode(0.0)
        assert add([c(3), c(-3)]) == ConstantNode(0.0)

    def test_only_constants_collapse_to_single_constant(self):
        assert add([c(1), c(2), c(3)]) == ConstantNode(6.0)

    def test_nan_constant_is_kept(self):
        result = add([c(float("nan")), v("x")])
        assert result.node_type == NodeType.ADDITION
        assert format_expression(result) == "NaN + x"

    def test_folding_is_logged_at_debug(self, capsys):
        configure_logging(LogLevel.VERBOSE)
        add([c(1), c(2), v("x")])
        assert "add folded 2 constants" in capsys.readouterr().out


class TestAddCollapse:
    def test_empty_is_zero(self):
        result = add([])
        assert result == ConstantNode(0.0)
        assert evaluate_expression(result) == 0.0

    def test_single_term_is_returned_unwrapped(self):
        for term in (v("x"), mul([c(2), v("y")]), neg(v("z"))):
            assert add([term]) is term

    def test_single_constant(self):
        assert add([c(5)]) == ConstantNode(5.0)

    def test_accepts_any_iterable(self):
        result = add(v(name) for name in "xyz")
        assert format_expression(result) == "x + y + z"

    def test_normalization_is_a_fixed_point(self):
        first = add([c(3), v("x"), c(4), mul([c(2), v("y")]), add([v("z"), v("w")])])
        assert add(list(first.terms)) == first
        assert add([first]) == first


class TestThinConstructors:
    def test_wrap_terms_unchanged(self):
        terms = [c(0), add([v("a"), v("b")]), c(0)]
        assert multiply(terms).terms == tuple(terms)
        assert subtract(terms).terms == tuple(terms)
        assert divide(terms).terms == tuple(terms)
        assert pow(terms).terms == tuple(terms)

    def test_no_flattening_or_folding(self):
        nested = mul([mul([c(2), c(3)]), c(4)])
        assert isinstance(nested, MultiplyNode)
        assert isinstance(nested.terms[0], MultiplyNode)
        assert len(nested.terms) == 2

    def test_single_term_is_still_wrapped(self):
        assert isinstance(sub([v("x")]), SubtractNode)
        assert isinstance(div([v("x")]), DivideNode)
        assert isinstance(pow([v("x")]), PowNode)

    def test_negate_wraps_one_node(self):
        node = negate(v("x"))
        assert isinstance(node, NegNode)
        assert node.operand == v("x")
        assert neg(v("x")) == node


class TestInvalidTerms:
    def test_add_rejects_non_nodes(self):
        with pytest.raises(InvalidExpressionError):
            add([1, v("x")])

    def test_operator_rejects_non_nodes(self):
        with pytest.raises(InvalidExpressionError):
            mul([c(2), "x"])

    def test_negate_rejects_non_node(self):
        with pytest.raises(InvalidExpressionError) as exc_info:
            negate(3.0)
        assert exc_info.value.value == 3.0
