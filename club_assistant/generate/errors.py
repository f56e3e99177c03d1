class GenerationError(RuntimeError):
    """The completion service failed, timed out, or returned nothing usable."""


class InvalidParametersError(ValueError):
    """A required generation parameter was missing or empty."""
