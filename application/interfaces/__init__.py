# application/interfaces/__init__.py
"""
Contratos de leitura do stream e de emissão dos resumos.
"""
