class BitmapError(Exception):
    """Base class for errors that abort a script run."""

    def __init__(self, message: str, line_num: int | None = None):
        super().__init__(message)
        self.message: str = message
        self.line_num: int | None = line_num

    def __str__(self) -> str:
        if self.line_num is None:
            return self.message
        return f"{self.message} - line {self.line_num}"


class EmptyLineError(BitmapError):
    pass


class UnknownCommandError(BitmapError):
    pass


class InvalidArgumentError(BitmapError, ValueError):
    pass


class DuplicateImageError(BitmapError):
    pass


class NoImageError(BitmapError):
    pass


class ScriptNotFoundError(BitmapError, FileNotFoundError):
    pass


class ScriptDecodeError(BitmapError):
    pass
