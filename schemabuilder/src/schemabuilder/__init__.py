"""Schema Builder: a normalization exercise and its schema validation engine."""

__version__ = "0.1.0"
