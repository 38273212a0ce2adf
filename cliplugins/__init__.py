"""Sample command-line plugins with localized output and service clients."""

__version__ = "0.1.0"