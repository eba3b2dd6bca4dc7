# domain/entities/run_report.py
from pydantic import BaseModel
from typing import Optional

class RunReport(BaseModel):
    """Diagnóstico de uma execução do pipeline."""
    records_applied: int = 0
    rejected_records: int = 0
    last_record_id: Optional[int] = None
    malformed_lines: int = 0
    lines_read: int = 0
    market_count: int = 0
    begin_seen: bool = False
    end_seen: bool = False
    duration_seconds: float = 0.0
    
    class Config:
        frozen = True
