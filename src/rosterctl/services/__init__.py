"""Service layer — roster operations and the report pipeline.

Services may import from the domain and config layers.
They must never import from commands or output.
"""
