"""Utility helpers for the core app."""

from core.utils.sampling import random_offset_sample

__all__ = ["random_offset_sample"]
