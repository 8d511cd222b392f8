"""
核心模組 - 串接宣告的解析、驗證與分析流程
"""

from src.data_model import Claim, OverlapReport

from .processor import FabricProcessor


__all__ = [
    "Claim",
    "OverlapReport",
    "FabricProcessor",
]
