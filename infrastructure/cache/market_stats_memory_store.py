# infrastructure/cache/market_stats_memory_store.py
from typing import Dict, List, Optional, Any
import logging

from domain.entities.trade import TradeRecord
from domain.entities.market_stats import MarketAggregate, MarketSummary
from domain.repositories.market_stats_store import IMarketStatsStore
from analyzers.statistics.market_stats_calculator import summarize_aggregate

logger = logging.getLogger(__name__)

class MarketStatsMemoryStore(IMarketStatsStore):
    """
    Implementação em memória do store de estatísticas por mercado.
    Cada negócio atualiza o agregado do seu mercado em O(1), sem reler histórico.
    """
    
    def __init__(self):
        self.aggregates: Dict[int, MarketAggregate] = {}
        
        # Estatísticas
        self.stats = {
            'trades_applied': 0,
            'markets_created': 0,
            'summaries_built': 0,
            'unknown_queries': 0
        }
        
        logger.debug("MarketStatsMemoryStore inicializado")
    
    def apply(self, trade: TradeRecord) -> None:
        """Aplica um negócio, criando o agregado do mercado se necessário."""
        aggregate = self.aggregates.get(trade.market_id)
        if aggregate is None:
            # Só registra o mercado se o primeiro negócio for aceito
            aggregate = MarketAggregate(market_id=trade.market_id)
            aggregate.update(trade)
            self.aggregates[trade.market_id] = aggregate
            self.stats['markets_created'] += 1
        else:
            aggregate.update(trade)
        
        self.stats['trades_applied'] += 1
    
    def summarize(self, market_id: int) -> MarketSummary:
        """Retorna o resumo do mercado; mercado desconhecido gera resumo zerado."""
        aggregate = self.aggregates.get(market_id)
        if aggregate is None:
            self.stats['unknown_queries'] += 1
            logger.debug(f"Resumo solicitado para mercado desconhecido: {market_id}")
        
        self.stats['summaries_built'] += 1
        return summarize_aggregate(market_id, aggregate)
    
    def all_market_ids(self) -> List[int]:
        """Retorna os mercados na ordem em que foram vistos."""
        return list(self.aggregates.keys())
    
    def get_aggregate(self, market_id: int) -> Optional[MarketAggregate]:
        return self.aggregates.get(market_id)
    
    def merge(self, other: IMarketStatsStore) -> None:
        """Incorpora os agregados de outro store (ex.: uma partição de mercados)."""
        merged = 0
        for market_id in other.all_market_ids():
            incoming = other.get_aggregate(market_id)
            if incoming is None:
                continue
            
            aggregate = self.aggregates.get(market_id)
            if aggregate is None:
                aggregate = MarketAggregate(market_id=market_id)
                self.aggregates[market_id] = aggregate
                self.stats['markets_created'] += 1
            
            aggregate.merge(incoming)
            self.stats['trades_applied'] += incoming.trade_count
            merged += 1
        
        logger.debug(f"Merge concluído: {merged} mercados incorporados")
    
    def get_size(self) -> int:
        """Retorna quantidade de mercados conhecidos."""
        return len(self.aggregates)
    
    def get_stats(self) -> Dict[str, Any]:
        """Retorna estatísticas detalhadas do store."""
        total_buys = sum(a.buy_count for a in self.aggregates.values())
        
        return {
            'basic_stats': dict(self.stats),
            'store_info': {
                'markets_tracked': len(self.aggregates),
                'total_trades': sum(a.trade_count for a in self.aggregates.values()),
                'total_buys': total_buys
            }
        }
