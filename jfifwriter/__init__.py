"""Baseline JPEG/JFIF encoder for 8-bit grayscale and RGB pixel data."""

__version__ = "1.0.0"

__all__ = ["bitwriter", "dct", "encoder", "huffman", "tables"]