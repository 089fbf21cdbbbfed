"""Parser error types."""


class ParseError(Exception):
    """Raised in strict mode when HTML or CSS source is malformed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)
