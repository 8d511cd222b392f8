"""
宣告處理器模組

串接解析、驗證、佔用圖建立與重疊分析，遵循單一職責原則 (SRP)
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from src.data_model import Claim, OverlapReport
from src.features.fabric import (
    OccupancyMap,
    analyze,
    build_occupancy,
    build_occupancy_partitioned,
    read_claims,
    validate_claims,
)


logger = logging.getLogger(__name__)


class FabricProcessor:
    """
    布料宣告處理器

    支援序列和分區並行兩種佔用圖建立模式
    """

    def __init__(self, max_workers: int = 1, partition_size: int = 256) -> None:
        """
        初始化處理器

        Args:
            max_workers: 並行工作執行緒數（1=序列處理，>1=分區並行處理）
            partition_size: 分區並行時每個分區的宣告數量
        """
        if partition_size < 1:
            raise ValueError(f"partition_size must be positive, got {partition_size}")
        self._max_workers = max(1, max_workers)
        self._partition_size = partition_size

    def build(self, claims: list[Claim]) -> OccupancyMap:
        """
        建立佔用圖

        根據 max_workers 與宣告數量自動選擇序列或分區模式

        Args:
            claims: 已驗證的宣告

        Returns:
            唯讀佔用圖
        """
        if self._max_workers <= 1 or len(claims) <= self._partition_size:
            return build_occupancy(claims)
        return build_occupancy_partitioned(
            claims,
            partition_size=self._partition_size,
            max_workers=self._max_workers,
        )

    def analyze_claims(self, claims: Iterable[Claim]) -> OverlapReport:
        """
        驗證並分析宣告

        Args:
            claims: 依輸入順序排列的宣告

        Returns:
            重疊分析結果

        Raises:
            ClaimValidationError: 宣告編號重複
        """
        validated = validate_claims(claims)
        if not validated:
            logger.warning("No claims to analyze")

        occupancy = self.build(validated)
        logger.info(
            "Placed %d claims on %d cells",
            len(validated),
            len(occupancy),
        )
        return analyze(validated, occupancy)

    def process_file(self, path: Path) -> OverlapReport:
        """
        讀取並分析宣告檔案

        Args:
            path: 宣告檔案路徑

        Returns:
            重疊分析結果

        Raises:
            ClaimParseError: 文字格式錯誤
            ClaimValidationError: 宣告違反約束
            OSError: 檔案無法讀取
        """
        return self.analyze_claims(read_claims(path))
