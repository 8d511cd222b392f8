"""
分析歷史模組

記錄每個宣告檔案最近一次的分析結果，讓檔案選擇器能在選項旁顯示摘要
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from src.data_model import OverlapReport


logger = logging.getLogger(__name__)

HISTORY_FILENAME: Final[str] = ".fabric_history.json"
MAX_HISTORY_ENTRIES: Final[int] = 10


class AnalysisRecord(BaseModel):
    """
    單一檔案的最近分析摘要

    Attributes:
        path: 宣告檔案絕對路徑
        analyzed_at: 分析時間
        claim_count: 宣告數量
        overlap_count: 重疊單位格數量
        isolated_claim_ids: 獨立宣告編號（遞增排序）
    """

    model_config = ConfigDict(frozen=True)

    path: Path
    analyzed_at: datetime
    claim_count: int = Field(ge=0)
    overlap_count: int = Field(ge=0)
    isolated_claim_ids: tuple[int, ...] = ()

    @classmethod
    def from_report(cls, path: Path, report: OverlapReport) -> "AnalysisRecord":
        """由分析結果建立摘要"""
        return cls(
            path=path.resolve(),
            analyzed_at=datetime.now(),
            claim_count=report.claim_count,
            overlap_count=report.overlap_count,
            isolated_claim_ids=tuple(sorted(report.isolated_claim_ids)),
        )

    @property
    def summary(self) -> str:
        """選單中顯示的一行摘要"""
        isolated = ", ".join(f"#{i}" for i in self.isolated_claim_ids) or "none"
        return f"{self.claim_count} claims, {self.overlap_count} overlapping, isolated: {isolated}"


_RECORDS = TypeAdapter(list[AnalysisRecord])


class ClaimFileHistory:
    """
    分析歷史管理

    以 JSON 儲存 AnalysisRecord 列表，同一檔案只保留最新一筆
    """

    def __init__(self, base_dir: Path | None = None) -> None:
        """
        Args:
            base_dir: 歷史檔案所在目錄，預設為目前工作目錄
        """
        self._history_file = (base_dir or Path.cwd()) / HISTORY_FILENAME

    @property
    def history_file(self) -> Path:
        """歷史檔案路徑"""
        return self._history_file

    def load(self) -> list[AnalysisRecord]:
        """
        讀取分析歷史

        格式錯誤的歷史檔案視為空白；已不存在的宣告檔案會被略過

        Returns:
            分析摘要列表（最新在前）
        """
        try:
            records = _RECORDS.validate_json(self._history_file.read_bytes())
        except FileNotFoundError:
            return []
        except (ValidationError, OSError) as exc:
            logger.warning("Ignoring unreadable history %s: %s", self._history_file, exc)
            return []
        return [record for record in records if record.path.is_file()]

    def record(self, path: Path, report: OverlapReport) -> AnalysisRecord:
        """
        記錄一次成功的分析

        Args:
            path: 宣告檔案路徑
            report: 分析結果

        Returns:
            新增的分析摘要
        """
        entry = AnalysisRecord.from_report(path, report)
        others = [r for r in self.load() if r.path != entry.path]
        records = [entry, *others][:MAX_HISTORY_ENTRIES]
        self._history_file.write_bytes(_RECORDS.dump_json(records, indent=2) + b"\n")
        return entry
