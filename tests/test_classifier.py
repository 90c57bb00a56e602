"""Tests for the component classifier."""

from scaffold_mcp.core.analyzer.classifier import (
    has_function_component_shape,
    is_component_module,
    references_framework,
    returns_markup,
)


class TestFrameworkReference:
    """Tests for the React import check."""

    def test_default_import(self):
        assert references_framework("import React from 'react';")

    def test_named_import_double_quotes(self):
        assert references_framework('import { useState } from "react";')

    def test_other_package_is_not_react(self):
        assert not references_framework("import { render } from 'react-dom';")


class TestMarkupReturn:
    """Tests for the markup-return check."""

    def test_direct_markup(self):
        assert returns_markup("return <div />;")

    def test_parenthesized_markup_across_lines(self):
        assert returns_markup("return (\n  <div>\n    hi\n  </div>\n);")

    def test_plain_return(self):
        assert not returns_markup("return a + b;")


class TestFunctionComponentShape:
    """Tests for the function-component shapes."""

    def test_function_declaration_returning_markup(self):
        assert has_function_component_shape("function App() {\n  return <main />;\n}")

    def test_const_arrow_with_markup(self):
        assert has_function_component_shape("const Badge = (props) => <span>{props.label}</span>;")

    def test_default_exported_function(self):
        assert has_function_component_shape("export default function () {}")

    def test_plain_function(self):
        assert not has_function_component_shape("function add(a, b) {\n  return a + b;\n}")


class TestIsComponentModule:
    """Tests for the combined classification rule."""

    def test_counter_is_component(self, counter_source):
        assert is_component_module(counter_source) is True

    def test_math_is_not_component(self, math_source):
        assert is_component_module(math_source) is False

    def test_hook_without_markup_is_not_component(self, hook_source):
        """A React import alone is not enough without a component shape."""
        assert is_component_module(hook_source) is False

    def test_markup_without_react_import(self):
        """Markup return satisfies the framework condition on its own."""
        code = "export function Tag() {\n  return <b>tag</b>;\n}\n"
        assert is_component_module(code) is True

    def test_component_shape_without_framework_or_markup(self):
        code = "export default function main() {\n  console.log('hi');\n}\n"
        assert is_component_module(code) is False

    def test_stray_angle_bracket_after_return(self):
        """Comparison after return is a known false positive."""
        code = "function isSmall(n) {\n  return (n < 10);\n}\n"
        assert is_component_module(code) is True

    def test_deterministic(self, counter_source):
        assert is_component_module(counter_source) == is_component_module(counter_source)

    def test_empty_text(self):
        assert is_component_module("") is False
