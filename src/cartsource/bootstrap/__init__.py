"""Bootstrap (composition root) for CARTSOURCE.

Assembles the application at runtime: wires concrete adapters to service-layer
handlers and composes the message bus and unit of work.

Import rules:
- Entry points import *this* package.
- Inner layers must not import `cartsource.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap, build_message_bus

__all__ = ["AppContainer", "bootstrap", "build_message_bus"]
