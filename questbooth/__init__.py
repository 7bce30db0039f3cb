"""A touchscreen photo booth with a quest-style choice flow, countdown capture and a mock camera."""

__version__ = "1.0.0"

__all__ = ["__version__"]