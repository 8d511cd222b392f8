"""
互動式檔案選擇

使用 InquirerPy 選擇要分析的宣告檔案
- 方向鍵選擇最近使用的檔案
- ESC / Ctrl-C 取消
"""

from pathlib import Path

from InquirerPy import inquirer
from InquirerPy.base.control import Choice
from InquirerPy.separator import Separator

from src.ui.history import ClaimFileHistory


_CUSTOM_PATH = "__custom__"
_RECENT_LIMIT = 5


class ClaimFilePrompt:
    """
    宣告檔案選擇器

    操作流程：
    1. 從最近使用的檔案中選擇，或選擇輸入新路徑
    2. 輸入新路徑時驗證檔案存在

    選擇器只讀取歷史；分析成功後才由呼叫端寫入
    """

    def __init__(self, history: ClaimFileHistory | None = None) -> None:
        self._history = history or ClaimFileHistory()

    def run(self) -> Path | None:
        """
        執行選擇流程

        Returns:
            宣告檔案路徑，若使用者取消則返回 None
        """
        choices: list[Choice | Separator] = []

        recent = self._history.load()[:_RECENT_LIMIT]
        if recent:
            choices.append(Separator("📁 最近使用"))
            for record in recent:
                name = f"  {record.path.name} ({record.path.parent}) - {record.summary}"
                choices.append(Choice(value=record.path, name=name))
            choices.append(Separator())

        choices.append(Choice(value=_CUSTOM_PATH, name="📝 輸入新路徑..."))

        selected = inquirer.select(
            message="選擇宣告檔案:",
            choices=choices,
            vi_mode=True,
            mandatory=False,
        ).execute()

        if selected is None:
            return None

        if selected == _CUSTOM_PATH:
            path_str = inquirer.filepath(
                message="輸入宣告檔案路徑:",
                default=str(Path.cwd()),
                validate=lambda p: Path(p).is_file(),
                invalid_message="檔案不存在",
                mandatory=False,
            ).execute()

            if path_str is None:
                return self.run()  # 返回選擇

            selected = Path(path_str)

        return selected
