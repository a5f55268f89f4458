class SkinError(ValueError):
    """Base class for skinnorm errors."""


class InvalidDimensions(SkinError):
    """
    A skin texture is neither square (modern) nor exactly 2:1 (legacy).
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        super().__init__(f"Bad skin size: {width}x{height}")


class SkinSourceError(SkinError):
    """A texture could not be read from a file, URL or username."""
