"""Ports (interfaces) for CARTSOURCE.

Framework-free contracts the service layer depends on and adapters implement.

Dependency rule: do not import from `cartsource.adapters`, `cartsource.bootstrap`
or `cartsource.entrypoints`.
"""
