"""Core utility types: optionals, variants, results, type sets, UTF helpers, dates, lazy values, checked references, background tasks and images."""

__version__ = "0.1.0"