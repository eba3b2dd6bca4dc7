# domain/repositories/market_stats_store.py
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from domain.entities.trade import TradeRecord
from domain.entities.market_stats import MarketAggregate, MarketSummary


class IMarketStatsStore(ABC):
    """Interface para o armazenamento de estatísticas por mercado."""

    @abstractmethod
    def apply(self, trade: TradeRecord) -> None:
        """Aplica um negócio ao estado do seu mercado."""

    @abstractmethod
    def summarize(self, market_id: int) -> MarketSummary:
        """Retorna o resumo de um mercado (zerado se desconhecido)."""

    @abstractmethod
    def all_market_ids(self) -> List[int]:
        """Retorna todos os mercados conhecidos."""

    @abstractmethod
    def get_size(self) -> int:
        """Retorna quantidade de mercados conhecidos."""

    @abstractmethod
    def get_aggregate(self, market_id: int) -> Optional[MarketAggregate]:
        """Retorna o estado acumulado de um mercado, se existir."""

    @abstractmethod
    def merge(self, other: "IMarketStatsStore") -> None:
        """Incorpora os estados de outro store."""

    @abstractmethod
    def get_stats(self) -> Dict[str, Any]:
        """Retorna estatísticas de uso do store."""
