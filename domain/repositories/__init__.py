# domain/repositories/__init__.py
"""
Interfaces de repositórios seguindo Clean Architecture.
Define contratos que devem ser implementados pela camada de infraestrutura.
"""

from .market_stats_store import IMarketStatsStore

__all__ = ['IMarketStatsStore']
