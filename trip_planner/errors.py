"""
Failure modes of the itinerary generation pipeline.

Every error is terminal for the current request. Routers turn them into a
single-field ``{"error": message}`` body using ``status_code``.
"""


class ItineraryGenerationError(Exception):
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ItineraryGenerationError):
    """Required input fields are missing; raised before any model call."""
    status_code = 400


class ConfigurationError(ItineraryGenerationError):
    """No credential is configured for the model service."""
    status_code = 500


class ModelResponseError(ItineraryGenerationError):
    """The model replied with text that is not an itinerary object."""
    status_code = 502


class TransportError(ItineraryGenerationError):
    """The call to the model service failed outright."""
    status_code = 502
