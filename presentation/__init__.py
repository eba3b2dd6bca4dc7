# presentation/__init__.py
"""
Exibição do diagnóstico no console.
"""
