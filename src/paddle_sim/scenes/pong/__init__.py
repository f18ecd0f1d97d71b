"""
Two-paddle game scene.
"""

from __future__ import annotations

from .scene import PaddleScene

__all__ = [
    "PaddleScene",
]
