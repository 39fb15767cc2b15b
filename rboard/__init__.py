"""Board models, kata-analyze parsing, engine configuration and board view geometry."""

__version__ = "0.1.1"