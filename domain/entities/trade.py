# domain/entities/trade.py
import numpy as np
from pydantic import BaseModel, Field

# Maior valor finito em precisão simples; acima disso o float32 vira inf
FLOAT32_MAX = float(np.finfo(np.float32).max)


class TradeRecord(BaseModel):
    """Representa um único negócio lido do stream de entrada."""
    id: int
    market_id: int = Field(alias="market")
    price: float = Field(allow_inf_nan=False, ge=-FLOAT32_MAX, le=FLOAT32_MAX)
    volume: float = Field(allow_inf_nan=False, ge=-FLOAT32_MAX, le=FLOAT32_MAX)
    is_buy: bool

    class Config:
        frozen = True
