"""Signed integer add, subtract and multiply on 64-bit word limbs, with method cut-off constants."""

__version__ = "0.1.0"
__all__ = ["tuning", "zz0"]