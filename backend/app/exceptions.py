"""Error taxonomy shared by services and routers."""


class TripWiseError(Exception):
    """Base class for all application errors."""


class ConfigurationError(TripWiseError):
    """A required external credential is missing."""


class ProviderError(TripWiseError):
    """An upstream service answered with a failure or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(TripWiseError):
    """An upstream payload could not be understood."""


class ValidationError(TripWiseError):
    """Caller input is invalid."""


class InvalidDateError(ValidationError):
    """A date string could not be parsed as a calendar date."""


class PersistenceError(TripWiseError):
    """The trip store rejected or failed an operation."""


class TripNotFoundError(TripWiseError):
    """No trip with the given id exists for the caller."""


class GenerationProviderError(ProviderError):
    """The language-model collaborator returned a non-success response."""


class GenerationParseError(ParseError):
    """The language-model response could not be turned into an itinerary."""
