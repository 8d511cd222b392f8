"""
共用模組

提供在多個功能間共用的工具和定義
"""

from .geometry import Cell, Rect


__all__ = [
    "Cell",
    "Rect",
]
