# presentation/console/run_report_view.py
from rich.console import Console
from rich.table import Table

from domain.entities.run_report import RunReport


def render_run_report(report: RunReport) -> Table:
    """Monta a tabela de diagnóstico de uma execução."""
    table = Table(title="📊 Resumo da Execução", show_header=True, header_style="bold cyan")
    table.add_column("Métrica", style="dim")
    table.add_column("Valor", justify="right")

    table.add_row("Negócios aplicados", f"{report.records_applied:,}")
    table.add_row("Último id", str(report.last_record_id) if report.last_record_id is not None else "-")
    table.add_row("Linhas lidas", f"{report.lines_read:,}")

    malformed_style = "red" if report.malformed_lines else "green"
    table.add_row("Linhas malformadas", f"[{malformed_style}]{report.malformed_lines:,}[/{malformed_style}]")
    rejected_style = "red" if report.rejected_records else "green"
    table.add_row("Negócios rejeitados", f"[{rejected_style}]{report.rejected_records:,}[/{rejected_style}]")
    table.add_row("Mercados", f"{report.market_count:,}")
    table.add_row("BEGIN encontrado", "✓" if report.begin_seen else "[yellow]✗[/yellow]")
    table.add_row("END encontrado", "✓" if report.end_seen else "[yellow]✗ (fim implícito)[/yellow]")
    table.add_row("Duração", f"{report.duration_seconds:.3f}s")
    return table


def print_run_report(console: Console, report: RunReport) -> None:
    console.print(render_run_report(report))
