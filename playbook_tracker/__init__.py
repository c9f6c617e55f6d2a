"""Flag football play tracker: record attempts/completions and print reports."""

__version__ = "0.1.0"
