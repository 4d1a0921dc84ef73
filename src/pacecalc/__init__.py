"""Running pace calculator: pace/speed conversion and race math."""

__version__ = "0.1.0"
