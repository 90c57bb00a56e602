"""Component classifier - decide whether module text defines a UI component.

This is surface-level pattern matching, not parsing: a stray `<` after a
`return` is enough to satisfy the markup check.
"""

import re

# Any React import, default or named
_FRAMEWORK_IMPORT = re.compile(r"import\s+React|import.*from\s+['\"]react['\"]")

# `return <...` or `return ( ... <`
_MARKUP_RETURN = re.compile(r"return\s*\([\s\S]*?<|return\s*<")

_FUNCTION_COMPONENT_SHAPES = (
    re.compile(r"function\s+\w+.*\(.*\).*\{[\s\S]*?return[\s\S]*?<"),
    re.compile(r"const\s+\w+.*=.*\(.*\).*=>[\s\S]*?<"),
    re.compile(r"export\s+default\s+function"),
)


def references_framework(content: str) -> bool:
    """Check for a React import."""
    return _FRAMEWORK_IMPORT.search(content) is not None


def returns_markup(content: str) -> bool:
    """Check for a `return` followed by markup."""
    return _MARKUP_RETURN.search(content) is not None


def has_function_component_shape(content: str) -> bool:
    """Check for a function declaration, arrow or default export shaped like a component."""
    return any(pattern.search(content) for pattern in _FUNCTION_COMPONENT_SHAPES)


def is_component_module(content: str) -> bool:
    """Classify module text as a UI component (True) or a function module (False)."""
    if not (references_framework(content) or returns_markup(content)):
        return False
    return has_function_component_shape(content)
