"""Blocking weatherapi.com client (``api``) and typed response models (``models``)."""

__version__ = "0.1.0"
__all__ = ["api", "models"]