# domain/entities/market_stats.py
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import numpy as np
from pydantic import BaseModel

from domain.exceptions import AggregateOverflowError

from .trade import TradeRecord


def _zero() -> np.float32:
    return np.float32(0)


@dataclass
class MarketAggregate:
    """
    Estado acumulado de um mercado.
    Todas as somas são mantidas em float32 (precisão simples).
    """
    market_id: int
    trade_count: int = 0
    buy_count: int = 0
    price_sum: np.float32 = field(default_factory=_zero)
    volume_sum: np.float32 = field(default_factory=_zero)
    notional_sum: np.float32 = field(default_factory=_zero)

    def update(self, trade: TradeRecord) -> None:
        """Aplica um negócio ao estado em O(1). Em caso de estouro o estado não muda."""
        price = np.float32(trade.price)
        volume = np.float32(trade.volume)

        with np.errstate(over='ignore', invalid='ignore'):
            price_sum = self.price_sum + price
            notional_sum = self.notional_sum + price * volume
            volume_sum = self.volume_sum + volume
        self._check_finite(price_sum, notional_sum, volume_sum, record_id=trade.id)

        self.price_sum = price_sum
        self.notional_sum = notional_sum
        self.volume_sum = volume_sum
        self.trade_count += 1
        if trade.is_buy:
            self.buy_count += 1

    def merge(self, other: "MarketAggregate") -> None:
        """Soma o estado parcial de outro agregado do mesmo mercado."""
        if other.market_id != self.market_id:
            raise ValueError(
                f"Não é possível combinar mercados diferentes: {self.market_id} != {other.market_id}"
            )
        with np.errstate(over='ignore', invalid='ignore'):
            price_sum = self.price_sum + other.price_sum
            notional_sum = self.notional_sum + other.notional_sum
            volume_sum = self.volume_sum + other.volume_sum
        self._check_finite(price_sum, notional_sum, volume_sum)

        self.price_sum = price_sum
        self.notional_sum = notional_sum
        self.volume_sum = volume_sum
        self.trade_count += other.trade_count
        self.buy_count += other.buy_count

    def _check_finite(self, *sums: np.float32, record_id: Optional[int] = None) -> None:
        if not all(np.isfinite(value) for value in sums):
            raise AggregateOverflowError(self.market_id, record_id)


class MarketSummary(BaseModel):
    """Resumo derivado de um MarketAggregate, pronto para serialização."""
    market: int
    total_volume: float = 0.0
    mean_price: float = 0.0
    mean_volume: float = 0.0
    volume_weighted_average_price: float = 0.0
    percentage_buy: float = 0.0

    class Config:
        frozen = True

    def to_output(self, include_market: bool = False) -> Dict[str, Any]:
        """Campos emitidos na linha JSON de saída."""
        if include_market:
            return self.model_dump()
        return self.model_dump(exclude={'market'})
