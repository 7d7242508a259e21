"""Service layer for CARTSOURCE.

Turns accepted commands into recorded events: handlers load the cart, let it
validate the command, build the resulting events and append them through the
unit of work.
"""
