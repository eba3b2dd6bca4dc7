# config/__init__.py
"""
Configuração carregada do config.yaml.
"""
