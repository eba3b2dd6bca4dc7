# analyzers/statistics/__init__.py
"""
Fórmulas das estatísticas por mercado (média, percentual, VWAP).
"""

from .market_stats_calculator import (
    calc_mean,
    calc_percentage,
    calc_vwap,
    summarize_aggregate
)

__all__ = [
    'calc_mean',
    'calc_percentage',
    'calc_vwap',
    'summarize_aggregate'
]
