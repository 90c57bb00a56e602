"""Registry for core MCP tool definitions and handlers."""

# Tool definitions and handlers
from .analyze_module import (
    TOOL_DEFINITION as ANALYZE_MODULE_TOOL,
    handle as handle_analyze_module,
)

from .generate_test_file import (
    TOOL_DEFINITION as GENERATE_TEST_FILE_TOOL,
    handle as handle_generate_test_file,
)

from .generate_all_tests import (
    TOOL_DEFINITION as GENERATE_ALL_TESTS_TOOL,
    handle as handle_generate_all_tests,
)

from .check_missing_tests import (
    TOOL_DEFINITION as CHECK_MISSING_TESTS_TOOL,
    handle as handle_check_missing_tests,
)


# All Core tool definitions
TOOLS = [
    ANALYZE_MODULE_TOOL,
    GENERATE_TEST_FILE_TOOL,
    GENERATE_ALL_TESTS_TOOL,
    CHECK_MISSING_TESTS_TOOL,
]

# Tool name to handler mapping
HANDLERS = {
    "analyze_module": handle_analyze_module,
    "generate_test_file": handle_generate_test_file,
    "generate_all_tests": handle_generate_all_tests,
    "check_missing_tests": handle_check_missing_tests,
}


__all__ = [
    # Tool definitions
    "TOOLS",
    "ANALYZE_MODULE_TOOL",
    "GENERATE_TEST_FILE_TOOL",
    "GENERATE_ALL_TESTS_TOOL",
    "CHECK_MISSING_TESTS_TOOL",
    # Handlers
    "HANDLERS",
    "handle_analyze_module",
    "handle_generate_test_file",
    "handle_generate_all_tests",
    "handle_check_missing_tests",
]
