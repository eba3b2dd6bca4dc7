# infrastructure/reporting/json_lines_reporter.py
import json
import logging
from collections import deque
from typing import Optional, TextIO

from domain.entities.market_stats import MarketSummary
from application.interfaces.summary_reporter import ISummaryReporter
from config import settings

logger = logging.getLogger(__name__)

class JsonLinesSummaryReporter(ISummaryReporter):
    """
    Implementação de ISummaryReporter que escreve um objeto JSON por linha
    (formato JSON Lines) no stream de saída.
    """

    def __init__(self, stream: TextIO, include_market: Optional[bool] = None, buffer_size: int = 1000):
        self.stream = stream
        if include_market is None:
            include_market = settings.OUTPUT_CONFIG.get('include_market', False)
        self.include_market = include_market

        # Resumos ficam em buffer e vão para o stream em lotes
        self.buffer: deque = deque()
        self.buffer_size = buffer_size
        self.written = 0
        self.closed = False

    def report(self, summary: MarketSummary) -> None:
        """Adiciona o resumo ao buffer, descarregando quando ele enche."""
        if self.closed:
            raise RuntimeError("Reporter já finalizado")

        self.buffer.append(summary.to_output(self.include_market))
        if len(self.buffer) >= self.buffer_size:
            self.flush()

    def flush(self) -> None:
        """Move os resumos do buffer para o stream."""
        if not self.buffer:
            return

        batch = list(self.buffer)
        self.buffer.clear()
        self._write_batch(batch)

    def _write_batch(self, batch: list) -> None:
        """Escreve um lote de resumos, um JSON por linha."""
        for item in batch:
            json.dump(item, self.stream, ensure_ascii=False, allow_nan=False)
            self.stream.write('\n')
        self.stream.flush()

        self.written += len(batch)
        logger.debug(f"Batch de {len(batch)} resumos escrito")

    def close(self) -> None:
        """Finaliza o reporter garantindo que nada fique no buffer."""
        if self.closed:
            return
        self.flush()
        self.closed = True
        logger.debug(f"Reporter finalizado: {self.written} resumos escritos")
