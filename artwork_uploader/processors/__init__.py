"""Processor modules for the per-image upload chain."""

from .pipeline import UploadPipeline

__all__ = ["UploadPipeline"]
