"""StackIt: a question and answer platform backend."""

__version__ = "1.0.0"
