"""Normalizers for converting exchange-specific data to unified format."""


from .base import BaseNormalizer
from .virtex_normalizer import DEFAULT_BASE_ASSET, VirtExNormalizer

__all__ = [
    "BaseNormalizer",
    "VirtExNormalizer",
    "DEFAULT_BASE_ASSET",
]
