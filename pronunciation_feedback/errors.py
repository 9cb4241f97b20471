"""Exceptions raised by the pronunciation feedback engine."""


class MalformedInputError(ValueError):
    """Raised when recognizer output has an invalid shape.

    Examples are negative indices, a phoneme or word whose start index
    lies after its end index, or a forced-alignment payload that fails
    validation.
    """
