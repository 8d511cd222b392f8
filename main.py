#!/usr/bin/env python3
"""
布料宣告重疊分析工具

主程式進入點

使用方法:
    uv run main.py [claims.txt]

未提供檔案路徑時，以互動方式從最近使用的檔案中選擇
"""

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from src.core.processor import FabricProcessor
from src.features.fabric import ClaimError
from src.settings.app import AppSettings
from src.ui import ClaimFileHistory, ClaimFilePrompt, render_report


def main(argv: Sequence[str] | None = None) -> int:
    """
    主程式

    Args:
        argv: 命令列參數（不含程式名稱），預設為 sys.argv[1:]

    Returns:
        退出碼 (0: 成功, 1: 失敗, 130: 中斷)
    """
    try:
        settings = AppSettings()
    except ValidationError as exc:
        print(f"\n❌ 設定錯誤: {exc}\n")
        return 1

    logging.basicConfig(level=settings.log_level, format="%(message)s")
    args = list(sys.argv[1:] if argv is None else argv)

    try:
        history = ClaimFileHistory(settings.history_dir)

        if args:
            path = Path(args[0])
        else:
            selected = ClaimFilePrompt(history).run()
            if selected is None:
                print("\n👋 再見！")
                return 0
            path = selected

        processor = FabricProcessor(
            max_workers=settings.max_workers,
            partition_size=settings.partition_size,
        )
        report = processor.process_file(path)
        history.record(path, report)

        render_report(report)
        return 0

    except KeyboardInterrupt:
        print("\n\n👋 已中斷操作，再見！")
        return 130

    except (ClaimError, OSError) as exc:
        print(f"\n❌ 錯誤: {exc}\n")
        logging.exception("處理時發生錯誤")
        return 1


if __name__ == "__main__":
    sys.exit(main())
