"""apiref: render extracted API symbol records into a static reference site."""

__version__ = "0.1.0"
