class FoodTruckFinderError(Exception):
    """Base class for failures that abort a finder run."""


class NetworkError(FoodTruckFinderError):
    """Connection failure, unreadable body or non-success HTTP status."""


class DecodeError(FoodTruckFinderError):
    """Response body is not a JSON array of objects."""


class ConfigError(FoodTruckFinderError):
    """Environment override that cannot be parsed."""
