"""
幾何工具模組

提供布料上矩形區域與單位格的運算
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeAlias


Cell: TypeAlias = tuple[int, int]


@dataclass(frozen=True, slots=True)
class Rect:
    """
    軸對齊矩形 (Axis-Aligned Rectangle)

    right 和 bottom 為不包含的座標（exclusive coordinates），
    涵蓋的單位格為 [left, right) × [top, bottom)

    Attributes:
        left: 左邊界
        top: 上邊界
        right: 右邊界 (不包含)
        bottom: 下邊界 (不包含)
    """

    left: int
    top: int
    right: int
    bottom: int

    @classmethod
    def from_origin(cls, x: int, y: int, width: int, height: int) -> "Rect":
        """由左上角與尺寸建立矩形"""
        return cls(left=x, top=y, right=x + width, bottom=y + height)

    def width(self) -> int:
        """計算寬度"""
        return self.right - self.left

    def height(self) -> int:
        """計算高度"""
        return self.bottom - self.top

    def area(self) -> int:
        """計算面積（退化矩形為 0）"""
        w = self.width()
        h = self.height()
        if w <= 0 or h <= 0:
            return 0
        return w * h

    def cells(self) -> Iterator[Cell]:
        """
        逐列走訪矩形涵蓋的所有單位格

        Returns:
            (x, y) 座標迭代器，先 x 後 y
        """
        for x in range(self.left, self.right):
            for y in range(self.top, self.bottom):
                yield (x, y)

