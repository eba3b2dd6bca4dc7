# analyzers/__init__.py
"""
Cálculos estatísticos sobre os agregados.
"""
