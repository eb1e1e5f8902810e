"""tilechess — click-to-move chess board engine."""

__version__ = "0.1.0"
