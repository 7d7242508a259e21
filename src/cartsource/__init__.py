"""CARTSOURCE

An event-sourced shopping cart. The cart aggregate validates commands and
rebuilds its state by replaying the domain events recorded for it.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
