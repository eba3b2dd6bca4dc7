"""
Fixtures compartilhadas pelos testes do sistema de estatísticas.
"""

import io
import json

import pytest

from domain.entities.trade import TradeRecord
from infrastructure.cache.market_stats_memory_store import MarketStatsMemoryStore


def make_trade(id=1, market=1, price=1.0, volume=1.0, is_buy=True) -> TradeRecord:
    """Cria um TradeRecord com valores padrão."""
    return TradeRecord(id=id, market=market, price=price, volume=volume, is_buy=is_buy)


def trade_line(id=1, market=1, price=1.0, volume=1.0, is_buy=True) -> str:
    """Linha JSON no formato do stream de entrada."""
    return json.dumps({
        "id": id,
        "market": market,
        "price": price,
        "volume": volume,
        "is_buy": is_buy,
    })


def text_stream(*lines: str) -> io.StringIO:
    """Stream de texto com uma linha por argumento."""
    return io.StringIO("".join(f"{line}\n" for line in lines))


@pytest.fixture
def store():
    return MarketStatsMemoryStore()


@pytest.fixture
def example_lines():
    """Exemplo de ponta a ponta: dois negócios do mercado 1."""
    return [
        "BEGIN",
        '{"id":1,"market":1,"price":2.0,"volume":10.0,"is_buy":true}',
        '{"id":2,"market":1,"price":4.0,"volume":10.0,"is_buy":false}',
        "END",
    ]
