class PathError(Exception):
    pass


class PathSyntaxError(PathError, ValueError):
    def __init__(self, message: str, text: str, position: int = -1):
        if position >= 0:
            message += f" at position {position}"
        message += f" in path {text!r}"

        self.text = text
        self.position = position

        super().__init__(message)


class InvalidSegmentError(PathError, TypeError):
    def __init__(self, segment, reason: str = "Path segments must be string or number"):
        self.segment = segment

        super().__init__(f"{reason}, got {segment!r}")


class InvalidPathInputError(PathError, TypeError):
    def __init__(self, value):
        self.value = value

        super().__init__(
            f"Invalid path input: expected a Path, string or list, "
            f"got {type(value).__name__}"
        )


class ConfigurationError(PathError, ValueError):
    pass
