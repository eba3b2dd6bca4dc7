# application/interfaces/summary_reporter.py
from abc import ABC, abstractmethod
from domain.entities.market_stats import MarketSummary

class ISummaryReporter(ABC):
    """Interface para os emissores de resumos por mercado."""

    @abstractmethod
    def report(self, summary: MarketSummary) -> None:
        """Registra o resumo de um mercado para emissão."""

    @abstractmethod
    def flush(self) -> None:
        """Garante que todos os resumos em buffer sejam escritos."""

    @abstractmethod
    def close(self) -> None:
        """Finaliza o reporter, escrevendo o que restar no buffer."""
