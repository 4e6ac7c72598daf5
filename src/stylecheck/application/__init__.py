"""stylecheck application layer.

Use cases over the domain model: exception registry, file and module
discovery, style checkers, reporters.
"""
