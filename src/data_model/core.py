"""
核心資料模型

使用 Pydantic 進行資料驗證和序列化，確保資料完整性
"""

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field

from src.common.geometry import Cell, Rect


class Claim(BaseModel):
    """
    布料宣告

    代表一個軸對齊的矩形區域 [x, x+width) × [y, y+height)
    寬或高為 0 的宣告合法，但不涵蓋任何單位格

    Attributes:
        id: 宣告編號（正整數，於同一批輸入中唯一）
        x: 左邊界
        y: 上邊界
        width: 寬度
        height: 高度
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)
    x: int = Field(ge=0)
    y: int = Field(ge=0)
    width: int = Field(ge=0)
    height: int = Field(ge=0)

    @property
    def rect(self) -> Rect:
        """宣告涵蓋的矩形"""
        return Rect.from_origin(self.x, self.y, self.width, self.height)

    @property
    def area(self) -> int:
        """涵蓋的單位格數量"""
        return self.rect.area()

    def cells(self) -> Iterator[Cell]:
        """走訪宣告涵蓋的所有單位格"""
        return self.rect.cells()

    def __str__(self) -> str:
        return f"#{self.id} @ {self.x},{self.y}: {self.width}x{self.height}"


class OverlapReport(BaseModel):
    """
    重疊分析結果

    Attributes:
        overlap_count: 被兩個以上宣告涵蓋的單位格數量
        isolated_claim_ids: 未與任何其他宣告共用單位格的宣告編號
        claim_count: 分析的宣告數量
        claimed_area: 所有宣告面積總和（重疊單位格重複計算）
        covered_cells: 至少被一個宣告涵蓋的單位格數量
        surface_width: 已涵蓋單位格外接矩形的寬度
        surface_height: 已涵蓋單位格外接矩形的高度
        conflict_groups: 透過共用單位格相連的宣告群組
    """

    model_config = ConfigDict(frozen=True)

    overlap_count: int = Field(ge=0)
    isolated_claim_ids: frozenset[int] = Field(default_factory=frozenset)
    claim_count: int = Field(default=0, ge=0)
    claimed_area: int = Field(default=0, ge=0)
    covered_cells: int = Field(default=0, ge=0)
    surface_width: int = Field(default=0, ge=0)
    surface_height: int = Field(default=0, ge=0)
    conflict_groups: tuple[frozenset[int], ...] = Field(default_factory=tuple)

    @property
    def has_overlaps(self) -> bool:
        """是否存在重疊"""
        return self.overlap_count > 0

    @property
    def largest_conflict_group(self) -> int:
        """最大衝突群組的宣告數量，無衝突時為 0"""
        return max((len(group) for group in self.conflict_groups), default=0)

    @property
    def sole_isolated_id(self) -> int | None:
        """恰好只有一個獨立宣告時返回其編號，否則返回 None"""
        if len(self.isolated_claim_ids) != 1:
            return None
        (claim_id,) = self.isolated_claim_ids
        return claim_id
