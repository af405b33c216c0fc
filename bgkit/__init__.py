"""Outcomes, WDL values, coordinates, bitboards, symmetries and engine protocol parsing for two-player board games."""

__version__ = "0.1.0"

__all__ = [
    "aei",
    "bitboard",
    "bits",
    "coord",
    "gtp",
    "mask",
    "pov",
    "rating",
    "symmetry",
    "uai",
    "wdl",
]