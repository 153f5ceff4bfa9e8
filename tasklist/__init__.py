"""Client for a remote task list API with urgency-ordered display."""

__version__ = "0.1.0"
