# orchestration/stats_pipeline.py
import time
import logging
from typing import List, Optional, Tuple

from application.interfaces.trade_record_reader import ITradeRecordReader
from application.interfaces.summary_reporter import ISummaryReporter
from domain.entities.run_report import RunReport
from domain.exceptions import AggregateOverflowError
from domain.repositories.market_stats_store import IMarketStatsStore
from config import settings

# Configuração do logger para este módulo
logger = logging.getLogger(__name__)

class StatsPipeline:
    """
    Orquestra uma execução completa: lê os negócios, aplica cada um ao store
    e, no fim do stream, emite um resumo por mercado.

    A ingestão e a consulta são fases separadas: nenhum resumo é emitido
    antes do stream terminar.
    """

    def __init__(
        self,
        reader: ITradeRecordReader,
        store: IMarketStatsStore,
        reporter: ISummaryReporter,
        sort_markets: Optional[bool] = None
    ):
        self.reader = reader
        self.store = store
        self.reporter = reporter
        if sort_markets is None:
            sort_markets = settings.OUTPUT_CONFIG.get('sort_markets', False)
        self.sort_markets = sort_markets

    def run(self) -> RunReport:
        """Executa o pipeline e retorna o diagnóstico da execução."""
        start_time = time.perf_counter()
        logger.info("--- Pipeline de estatísticas iniciado ---")

        applied, rejected = self._ingest()
        market_ids = self._market_ids()
        self._report(market_ids)

        duration = time.perf_counter() - start_time
        stats = self.reader.get_stats()

        report = RunReport(
            records_applied=applied,
            rejected_records=rejected,
            last_record_id=stats.get('last_record_id'),
            malformed_lines=stats.get('malformed_lines', 0),
            lines_read=stats.get('lines_read', 0),
            market_count=self.store.get_size(),
            begin_seen=stats.get('begin_seen', False),
            end_seen=stats.get('end_seen', False),
            duration_seconds=duration
        )

        logger.info(f"Negócios aplicados: {report.records_applied} (último id: {report.last_record_id})")
        logger.info(f"Mercados: {report.market_count}")
        if report.malformed_lines:
            logger.warning(f"{report.malformed_lines} linhas malformadas descartadas")
        if report.rejected_records:
            logger.warning(f"{report.rejected_records} negócios rejeitados por estouro de float32")
        logger.info(f"Duração: {report.duration_seconds:.3f}s")
        return report

    def _ingest(self) -> Tuple[int, int]:
        """Fase de ingestão: aplica cada negócio na ordem de chegada."""
        applied = 0
        rejected = 0
        for record in self.reader.records():
            try:
                self.store.apply(record)
            except AggregateOverflowError as e:
                rejected += 1
                logger.warning(f"{e} - negócio descartado")
                continue
            applied += 1

        logger.debug(f"Ingestão concluída: {applied} negócios aplicados, {rejected} rejeitados")
        return applied, rejected

    def _market_ids(self) -> List[int]:
        market_ids = self.store.all_market_ids()
        if self.sort_markets:
            market_ids = sorted(market_ids)
        return market_ids

    def _report(self, market_ids: List[int]) -> None:
        """Fase de consulta: um resumo por mercado conhecido."""
        try:
            for market_id in market_ids:
                self.reporter.report(self.store.summarize(market_id))
        finally:
            self.reporter.close()
