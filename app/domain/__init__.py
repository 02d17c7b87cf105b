"""Domain-level definitions shared across layers.

This package holds values whose meaning is part of the public contract
(e.g. problem categories and their type uris), independent from *where*
they are produced (services, exception handlers, etc.).
"""
