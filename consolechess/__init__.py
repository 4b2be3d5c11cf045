"""Two-player chess rules engine with a colour-terminal front end."""

__version__ = "0.1.0"