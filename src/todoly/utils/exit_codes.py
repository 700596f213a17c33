"""
Exit codes for ToDoLy.

Semantic exit codes so scripts wrapping the CLI can tell what went wrong
without parsing the output.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error (empty title, bad date)
ERROR_INVALID_ARGS = 2

# Task not found
ERROR_NOT_FOUND = 5

# Task file could not be written
ERROR_STORAGE = 7


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
        ERROR_STORAGE: "ERROR_STORAGE",
    }
    return code_names.get(code, f"UNKNOWN({code})")

