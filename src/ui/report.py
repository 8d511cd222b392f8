"""
分析結果輸出

使用 rich 將重疊分析結果渲染為表格
"""

from rich.console import Console
from rich.table import Table

from src.data_model import OverlapReport


def format_isolated(report: OverlapReport) -> str:
    """將獨立宣告編號格式化為文字（遞增排序）"""
    if not report.isolated_claim_ids:
        return "none"
    return ", ".join(f"#{claim_id}" for claim_id in sorted(report.isolated_claim_ids))


def build_report_table(report: OverlapReport) -> Table:
    """
    建立結果表格

    Args:
        report: 重疊分析結果

    Returns:
        rich 表格
    """
    table = Table(title="Fabric claims", show_header=True, header_style="bold blue")
    table.add_column("Metric")
    table.add_column("Value", justify="right")

    table.add_row("Claims", str(report.claim_count))
    table.add_row("Claimed area", str(report.claimed_area))
    table.add_row("Covered cells", str(report.covered_cells))
    table.add_row("Surface", f"{report.surface_width}x{report.surface_height}")
    table.add_row("Part 1: overlapping cells", f"[bold]{report.overlap_count}[/bold]")
    table.add_row("Part 2: isolated claims", f"[bold]{format_isolated(report)}[/bold]")
    table.add_row("Conflict groups", str(len(report.conflict_groups)))
    table.add_row("Largest conflict group", str(report.largest_conflict_group))
    return table


def render_report(report: OverlapReport, console: Console | None = None) -> None:
    """
    輸出結果表格

    Args:
        report: 重疊分析結果
        console: 輸出目標，預設為標準輸出
    """
    console = console or Console()
    console.print(build_report_table(report))
    if not report.has_overlaps:
        console.print("[green]No overlapping claims[/green]")
    if report.isolated_claim_ids and report.sole_isolated_id is None:
        console.print(
            f"[yellow]Found {len(report.isolated_claim_ids)} isolated claims[/yellow]"
        )
