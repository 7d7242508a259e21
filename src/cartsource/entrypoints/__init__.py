"""Entrypoints (inbound adapters) for CARTSOURCE.

Expose the application to the outside world. Parse and validate inputs, call
into the domain or service layer, and present results.
"""
