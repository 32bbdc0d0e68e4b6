"""Status line generator built from small system-information components."""

__version__ = "1.1.0"