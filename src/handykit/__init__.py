"""handykit

Small, dependable text and data helpers: URL slugs, display-name
normalization, content-hashed file names, and a handful of number, string,
time and sleep utilities, with a command-line front end.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
