"""Convert decimal integers to bases 2 through 36, from Python or the ``convert`` command."""

__version__ = "1.0.0"