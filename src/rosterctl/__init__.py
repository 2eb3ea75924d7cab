"""rosterctl — employee roster report CLI."""

__version__ = "0.1.0"
