"""Emergency-supply placement on road networks, with scenario parsing, layout, shift and colour helpers."""

__version__ = "0.1.0"