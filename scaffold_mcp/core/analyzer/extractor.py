"""Extract structural facts from module text with literal regex scans."""

import re

_EXPORT_PATTERNS = (
    re.compile(r"export\s+function\s+(\w+)"),
    re.compile(r"export\s+const\s+(\w+)\s*="),
    re.compile(r"export\s+\{\s*([^}]+)\s*\}"),
    re.compile(r"export\s+default\s+function\s+(\w+)"),
    re.compile(r"export\s+default\s+(\w+)"),
)

_IMPORT_PATTERN = re.compile(r"import.*from\s+['\"]([^'\"]+)['\"]")

_PROPS_USAGE = re.compile(r"props\s*[:(]|(?:interface|type)\s+\w*Props?\b")

# Non-nested brace scan: stops at the first closing brace
_PROPS_DECLARATION = re.compile(r"(?:interface|type)\s+(\w*Props?)\b\s*=?\s*\{[^}]*\}")

_STATE_USAGE = re.compile(r"useState|this\.state")

_EFFECT_USAGE = re.compile(r"useEffect|componentDidMount|componentDidUpdate")

_ASYNC_USAGE = re.compile(r"async\s+function|=\s*async")


def extract_exported_names(content: str) -> frozenset[str]:
    """Collect exported names from every export shape (order not preserved)."""
    names: set[str] = set()

    for pattern in _EXPORT_PATTERNS:
        for match in pattern.finditer(content):
            # Grouped clause: export { a, b }
            names.update(part.strip() for part in match.group(1).split(","))

    names.discard("")
    return frozenset(names)


def extract_imported_modules(content: str) -> tuple[str, ...]:
    """Collect `from "<path>"` targets in source order, keeping duplicates."""
    return tuple(match.group(1) for match in _IMPORT_PATTERN.finditer(content))


def has_input_params(content: str) -> bool:
    return _PROPS_USAGE.search(content) is not None


def find_input_params_type_name(content: str) -> str | None:
    """Return the name of the first `...Props` interface/type declaration, if any."""
    match = _PROPS_DECLARATION.search(content)
    return match.group(1) if match else None


def has_internal_state(content: str) -> bool:
    return _STATE_USAGE.search(content) is not None


def has_lifecycle_effects(content: str) -> bool:
    return _EFFECT_USAGE.search(content) is not None


def is_async_module(content: str) -> bool:
    return _ASYNC_USAGE.search(content) is not None
