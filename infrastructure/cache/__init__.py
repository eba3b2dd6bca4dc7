# infrastructure/cache/__init__.py
"""
Módulo de cache para o sistema de estatísticas.
Fornece o store em memória dos agregados por mercado.
"""

from .market_stats_memory_store import MarketStatsMemoryStore

__all__ = ['MarketStatsMemoryStore']
