# analyzers/statistics/market_stats_calculator.py
"""Fórmulas das estatísticas por mercado, sempre em precisão simples (float32)."""
from typing import Optional

import numpy as np

from domain.entities.market_stats import MarketAggregate, MarketSummary


def calc_mean(total: np.float32, count: int) -> np.float32:
    """Média simples; zero quando não há negócios."""
    if count == 0:
        return np.float32(0)
    return np.float32(total) / np.float32(count)


def calc_percentage(num: int, den: int) -> np.float32:
    """Fração num/den; zero quando den é zero."""
    if den == 0:
        return np.float32(0)
    return np.float32(num) / np.float32(den)


def calc_vwap(notional_sum: np.float32, volume_sum: np.float32) -> np.float32:
    """Preço médio ponderado por volume (VWAP)."""
    if volume_sum == 0 or notional_sum == 0:
        return np.float32(0)
    return np.float32(notional_sum) / np.float32(volume_sum)


def to_output_float(value: np.float32) -> float:
    """
    Converte um float32 para o float do Python com a menor representação
    decimal que identifica o valor em 32 bits (ex.: 0.1 e não 0.10000000149).
    """
    return float(str(np.float32(value)))


def summarize_aggregate(market_id: int, aggregate: Optional[MarketAggregate]) -> MarketSummary:
    """Deriva o MarketSummary a partir do estado acumulado."""
    if aggregate is None:
        return MarketSummary(market=market_id)

    count = aggregate.trade_count
    return MarketSummary(
        market=market_id,
        total_volume=to_output_float(aggregate.volume_sum),
        mean_price=to_output_float(calc_mean(aggregate.price_sum, count)),
        mean_volume=to_output_float(calc_mean(aggregate.volume_sum, count)),
        volume_weighted_average_price=to_output_float(
            calc_vwap(aggregate.notional_sum, aggregate.volume_sum)
        ),
        percentage_buy=to_output_float(calc_percentage(aggregate.buy_count, count)),
    )
