"""Registry for git MCP tool definitions and handlers."""

from .git_changed_tests import (
    TOOL_DEFINITION as GIT_CHANGED_TESTS_TOOL,
)
from .git_changed_tests import (
    handle as handle_git_changed_tests,
)
from .git_new_tests import (
    TOOL_DEFINITION as GIT_NEW_TESTS_TOOL,
)
from .git_new_tests import (
    handle as handle_git_new_tests,
)
from .git_stage_tests import (
    TOOL_DEFINITION as GIT_STAGE_TESTS_TOOL,
)
from .git_stage_tests import (
    handle as handle_git_stage_tests,
)

# All git tool definitions
TOOLS = [
    GIT_CHANGED_TESTS_TOOL,
    GIT_NEW_TESTS_TOOL,
    GIT_STAGE_TESTS_TOOL,
]

# Tool name to handler mapping
HANDLERS = {
    "git_changed_tests": handle_git_changed_tests,
    "git_new_tests": handle_git_new_tests,
    "git_stage_tests": handle_git_stage_tests,
}


__all__ = [
    # Tool definitions
    "TOOLS",
    "GIT_CHANGED_TESTS_TOOL",
    "GIT_NEW_TESTS_TOOL",
    "GIT_STAGE_TESTS_TOOL",
    # Handlers
    "HANDLERS",
    "handle_git_changed_tests",
    "handle_git_new_tests",
    "handle_git_stage_tests",
]
