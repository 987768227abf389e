"""Utility modules for identifiers and path parsing."""

from .identifiers import derive_title, new_image_id, split_image_paths

__all__ = [
    "derive_title",
    "new_image_id",
    "split_image_paths",
]
