# domain/exceptions.py
from typing import Optional


class TradeStatsError(Exception):
    """Erro base do sistema de estatísticas de trades."""


class MalformedRecordError(TradeStatsError):
    """Linha do stream que não pôde ser decodificada como TradeRecord."""

    def __init__(self, line_number: int, raw: str, reason: str):
        self.line_number = line_number
        self.raw = raw
        self.reason = reason
        super().__init__(f"Registro malformado na linha {line_number}: {reason}")


class AggregateOverflowError(TradeStatsError):
    """Negócio cujas somas estourariam a faixa finita do float32."""

    def __init__(self, market_id: int, record_id: Optional[int] = None):
        self.market_id = market_id
        self.record_id = record_id
        super().__init__(
            f"Estouro de float32 no mercado {market_id} (registro {record_id}) - estado preservado"
        )


class StreamReadError(TradeStatsError):
    """Falha de leitura do stream de entrada. Sempre fatal para a execução."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        super().__init__(message)
