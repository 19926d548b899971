"""srcfixer - whitespace and inline comment normalizer for source trees."""

__version__ = "1.0.0"
