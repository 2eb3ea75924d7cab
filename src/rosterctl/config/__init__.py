"""Configuration layer — frozen report constants, settings, and logging setup."""
