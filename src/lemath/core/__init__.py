"""
Core value types and numerical primitives.

Contains the Complex value type, the angle unit conversions and the
IEEE-754 safe real primitives they are built on.
"""
