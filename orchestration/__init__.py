# orchestration/__init__.py
"""
Orquestração da execução do pipeline.
"""
