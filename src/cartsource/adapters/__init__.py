"""Adapters (outbound implementations of the interfaces) for CARTSOURCE."""
