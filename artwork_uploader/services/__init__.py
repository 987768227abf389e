"""Service modules for external integrations."""

from .canvia import CanviaClient

__all__ = ["CanviaClient"]
