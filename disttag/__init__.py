"""Apply npm distribution tags to packages listed in a publish summary."""

__version__ = "0.1.0"
