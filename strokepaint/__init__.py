"""Stroke geometry, draw-command building, buffer pooling and frame preparation for a small paint program."""

__version__ = "0.1.0"