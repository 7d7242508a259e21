"""Domain layer for CARTSOURCE.

Contains business rules: the cart aggregate, value objects, commands, domain
events and errors. This package is deliberately technology-agnostic.

Dependency rule: do not import from `cartsource.adapters` or `cartsource.entrypoints`.
"""
