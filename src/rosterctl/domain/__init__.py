"""Domain layer — people, employees, display formats, and seed data.

This layer depends only on stdlib.
It must never import from services, output, commands, or config.
"""
