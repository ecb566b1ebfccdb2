
class SpaceRaceError(Exception):
    """Base exception for Space Race dashboard errors."""

    pass


class DataExtractionError(SpaceRaceError):
    """Raised when the mission CSV cannot be read or fetched."""
    pass


class DataTransformationError(SpaceRaceError):
    """Raised when the raw rows cannot be turned into missions."""
    pass


class DataLoadError(SpaceRaceError):
    """Raised when exporting reports or clean data fails."""
    pass


class InvalidDatetimeError(SpaceRaceError):
    """Raised when a launch date cannot be parsed."""
    pass


class ConfigError(SpaceRaceError):
    """Raised when there is a configuration issue."""
    pass
