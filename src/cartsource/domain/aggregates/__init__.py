"""Aggregates package.


All aggregates are defined in this package and inherit from the base `Aggregate`
class in `base.py`. They are re-exported here to provide a single, convenient
import path.
"""

from .base import Aggregate
from .cart import Cart
from .cart_item import CartItem

__all__ = ["Aggregate", "Cart", "CartItem"]
