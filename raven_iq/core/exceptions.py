"""
Exceptions raised by the Raven-IQ core.
"""


class InvalidLevelError(ValueError):
    """Raised for a difficulty level outside 1..6 when strict validation is on."""

    def __init__(self, level):
        self.level = level
        super().__init__(f"Invalid level: {level!r} (expected an integer from 1 to 6)")
