"""Centralized exit codes for the srcfix CLI."""


class ExitCodes:
    """Standard exit codes for the srcfix CLI."""

    SUCCESS = 0

    USAGE = 1
    NOT_FOUND = 2

    @classmethod
    def get_description(cls, code: int) -> str:
        """Get human-readable description for an exit code."""
        descriptions = {
            cls.SUCCESS: "Success - All files processed",
            cls.USAGE: "No input file or directory given",
            cls.NOT_FOUND: "Input path is neither a file nor a directory",
        }
        return descriptions.get(code, f"Unknown exit code: {code}")
