class QuickHullError(Exception):
    """Base error of the hull tooling."""


class PointsFileError(QuickHullError, ValueError):
    """Points file is malformed."""

    def __init__(self, path, line_no: int, message: str):
        self.path = path
        self.line_no = line_no
        super().__init__(f"{path}:{line_no}: {message}")
