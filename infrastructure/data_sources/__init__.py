# infrastructure/data_sources/__init__.py
"""
Fontes de dados do sistema.
Fornece o leitor do stream de negócios delimitado por marcadores.
"""

from .sentinel_stream_reader import SentinelStreamReader

__all__ = ['SentinelStreamReader']
