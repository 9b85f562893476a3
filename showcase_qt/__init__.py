"""
PyQt6 showcase application for the design-consts tokens.
"""
