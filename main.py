# main.py
import argparse
import io
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from rich.console import Console
from rich.logging import RichHandler

from config import settings
from domain.entities.run_report import RunReport
from domain.exceptions import MalformedRecordError, StreamReadError
from infrastructure.cache.market_stats_memory_store import MarketStatsMemoryStore
from infrastructure.data_sources.sentinel_stream_reader import SentinelStreamReader
from infrastructure.reporting.json_lines_reporter import JsonLinesSummaryReporter
from orchestration.stats_pipeline import StatsPipeline
from presentation.console.run_report_view import print_run_report

# stdout é reservado para os resumos; diagnóstico vai para stderr
console = Console(stderr=True)

logger = logging.getLogger(__name__)


# --- CONFIGURAÇÃO DE LOGGING ---
def configure_logging(level: str, log_to_file: bool = False, log_dir: str = 'logs') -> None:
    """Configura o logger raiz: Rich no stderr e, opcionalmente, arquivo."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    rich_handler = RichHandler(
        console=console,
        level=level,
        show_time=False,
        markup=False,
        rich_tracebacks=True
    )
    root_logger.addHandler(rich_handler)

    if log_to_file:
        path = Path(log_dir)
        path.mkdir(exist_ok=True)
        file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        file_handler = logging.FileHandler(path / "system.log", mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)


def handle_uncaught_exception(exc_type, exc_value, exc_traceback):
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return
    logging.critical("EXCEÇÃO NÃO TRATADA", exc_info=(exc_type, exc_value, exc_traceback))


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trade-stats",
        description="Estatísticas por mercado de um stream de negócios delimitado por BEGIN/END"
    )
    parser.add_argument(
        "input", nargs="?", default=None,
        help="arquivo de entrada (padrão: stdin)"
    )
    parser.add_argument(
        "-o", "--output", default=None,
        help="arquivo de saída JSON Lines (padrão: stdout)"
    )
    parser.add_argument(
        "--include-market", action="store_true", default=None,
        help="inclui o campo 'market' em cada resumo"
    )
    parser.add_argument(
        "--sort-markets", action="store_true", default=None,
        help="emite os mercados em ordem crescente de id"
    )
    parser.add_argument(
        "--strict", action="store_true",
        help="encerra com erro na primeira linha malformada"
    )
    parser.add_argument(
        "--show-report", action="store_true", default=None,
        help="exibe a tabela de diagnóstico no stderr"
    )
    parser.add_argument(
        "--log-level", default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="nível de log (padrão: system.log_level do config.yaml)"
    )
    return parser


def run_stats(
    input_stream: TextIO,
    output_stream: TextIO,
    include_market: Optional[bool] = None,
    sort_markets: Optional[bool] = None,
    on_malformed: Optional[str] = None
) -> RunReport:
    """Monta os componentes e executa uma passada completa sobre o stream."""
    reader = SentinelStreamReader(input_stream, on_malformed=on_malformed)
    store = MarketStatsMemoryStore()
    reporter = JsonLinesSummaryReporter(output_stream, include_market=include_market)

    pipeline = StatsPipeline(reader, store, reporter, sort_markets=sort_markets)
    return pipeline.run()


def main(argv: Optional[List[str]] = None) -> int:
    """Ponto de entrada do sistema."""
    args = create_parser().parse_args(argv)

    configure_logging(
        level=args.log_level or settings.SYSTEM_CONFIG.get('log_level', 'INFO'),
        log_to_file=settings.SYSTEM_CONFIG.get('log_to_file', False),
        log_dir=settings.SYSTEM_CONFIG.get('log_dir', 'logs')
    )
    sys.excepthook = handle_uncaught_exception

    show_report = args.show_report
    if show_report is None:
        show_report = settings.DISPLAY_CONFIG.get('show_report', False)

    encoding = settings.STREAM_CONFIG.get('encoding', 'utf-8')
    input_stream = sys.stdin
    output_stream = sys.stdout

    try:
        if args.input:
            input_stream = open(args.input, 'r', encoding=encoding)
        # O arquivo de saída só é aberto (e truncado) depois de uma execução completa
        if args.output:
            output_stream = io.StringIO()

        report = run_stats(
            input_stream,
            output_stream,
            include_market=args.include_market,
            sort_markets=args.sort_markets,
            on_malformed='fail' if args.strict else None
        )

        if args.output:
            with open(args.output, 'w', encoding='utf-8') as f:
                f.write(output_stream.getvalue())

        if show_report:
            print_run_report(console, report)
        return 0

    except MalformedRecordError as e:
        logger.error(f"Execução interrompida (modo estrito): {e}")
        return 1
    except StreamReadError as e:
        logger.critical(f"Erro fatal de leitura: {e}", exc_info=True)
        return 1
    except OSError as e:
        logger.critical(f"Erro de I/O: {e}")
        return 1
    except KeyboardInterrupt:
        console.print("\n[bold]Execução interrompida pelo usuário.[/bold]")
        return 130
    finally:
        if input_stream is not sys.stdin:
            input_stream.close()


if __name__ == "__main__":
    sys.exit(main())
