# infrastructure/reporting/__init__.py
"""
Emissão dos resumos por mercado.
"""

from .json_lines_reporter import JsonLinesSummaryReporter

__all__ = ['JsonLinesSummaryReporter']
