# application/interfaces/trade_record_reader.py
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator
from domain.entities.trade import TradeRecord

class ITradeRecordReader(ABC):
    """Interface para leitores do stream de negócios."""

    @abstractmethod
    def records(self) -> Iterator[TradeRecord]:
        """Retorna os negócios decodificados, um a um, até o fim do stream."""

    @abstractmethod
    def get_stats(self) -> Dict[str, Any]:
        """Retorna os contadores da leitura."""
