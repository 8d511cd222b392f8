"""
使用者介面模組
"""

from .history import AnalysisRecord, ClaimFileHistory
from .prompt import ClaimFilePrompt
from .report import build_report_table, format_isolated, render_report


__all__ = [
    "AnalysisRecord",
    "ClaimFileHistory",
    "ClaimFilePrompt",
    "build_report_table",
    "format_isolated",
    "render_report",
]
