"""Custom exception hierarchy for maze search."""


class BuglabError(Exception):
    """Base exception for maze search failures."""


class ConfigError(BuglabError):
    """Raised when a run configuration holds invalid values."""


class LayoutError(BuglabError):
    """Raised when a layout is queried or modified outside its grid."""


class MazeFormatError(BuglabError):
    """Raised when maze text cannot be parsed into a layout."""
