# infrastructure/data_sources/sentinel_stream_reader.py
import logging
from typing import Any, Dict, Iterator, Optional, TextIO

from pydantic import ValidationError

from domain.entities.trade import TradeRecord
from domain.exceptions import MalformedRecordError, StreamReadError
from application.interfaces.trade_record_reader import ITradeRecordReader
from config import settings

logger = logging.getLogger(__name__)

MALFORMED_POLICIES = ('skip', 'fail')

class SentinelStreamReader(ITradeRecordReader):
    """
    Implementação de ITradeRecordReader que lê linhas JSON de um stream de texto
    delimitado pelos marcadores BEGIN/END.

    Linhas antes do BEGIN são ignoradas. O fim do stream sem END é tratado como
    fim implícito. Linhas malformadas são descartadas com aviso (política 'skip')
    ou interrompem a execução (política 'fail').
    """

    def __init__(
        self,
        stream: TextIO,
        begin_marker: Optional[str] = None,
        end_marker: Optional[str] = None,
        on_malformed: Optional[str] = None
    ):
        cfg = settings.STREAM_CONFIG
        self.stream = stream
        self.begin_marker = begin_marker or cfg.get('begin_marker', 'BEGIN')
        self.end_marker = end_marker or cfg.get('end_marker', 'END')
        self.on_malformed = on_malformed or cfg.get('on_malformed', 'skip')
        if self.on_malformed not in MALFORMED_POLICIES:
            raise ValueError(f"Política de linha malformada inválida: {self.on_malformed}")

        # Contadores da leitura
        self.line_number = 0
        self.records_read = 0
        self.malformed_lines = 0
        self.last_record_id: Optional[int] = None
        self.begin_seen = False
        self.end_seen = False
        self._consumed = False

    def records(self) -> Iterator[TradeRecord]:
        """Gera os negócios entre BEGIN e END. Só pode ser consumido uma vez."""
        if self._consumed:
            raise RuntimeError("O stream de negócios já foi consumido")
        self._consumed = True

        lines = self._lines()

        # Procura o início
        for line in lines:
            if line == self.begin_marker:
                self.begin_seen = True
                break

        if not self.begin_seen:
            logger.warning(f"Marcador '{self.begin_marker}' não encontrado em {self.line_number} linhas lidas")
            return

        for line in lines:
            if line == self.end_marker:
                self.end_seen = True
                break

            if not line.strip():
                continue

            record = self._decode(line)
            if record is None:
                continue

            self.records_read += 1
            self.last_record_id = record.id
            yield record

        if not self.end_seen:
            logger.info(f"Stream encerrado sem '{self.end_marker}' - fim implícito na linha {self.line_number}")

    def _decode(self, line: str) -> Optional[TradeRecord]:
        """Decodifica uma linha; retorna None se ela foi descartada."""
        try:
            return TradeRecord.model_validate_json(line)
        except ValidationError as e:
            first = e.errors()[0]
            location = '.'.join(str(part) for part in first.get('loc', ()))
            reason = f"{location}: {first['msg']}" if location else first['msg']
            error = MalformedRecordError(self.line_number, line, reason)

        if self.on_malformed == 'fail':
            raise error

        self.malformed_lines += 1
        logger.warning(f"{error} - linha descartada: {line[:120]!r}")
        return None

    def _lines(self) -> Iterator[str]:
        """Itera as linhas do stream sem o terminador, convertendo falhas de leitura."""
        iterator = iter(self.stream)
        while True:
            try:
                raw = next(iterator)
            except StopIteration:
                return
            except (OSError, UnicodeDecodeError) as e:
                raise StreamReadError(
                    f"Falha de leitura após a linha {self.line_number}: {e}",
                    line_number=self.line_number
                ) from e

            self.line_number += 1
            yield raw.rstrip('\r\n')

    def get_stats(self) -> Dict[str, Any]:
        return {
            'lines_read': self.line_number,
            'records_read': self.records_read,
            'malformed_lines': self.malformed_lines,
            'last_record_id': self.last_record_id,
            'begin_seen': self.begin_seen,
            'end_seen': self.end_seen
        }
