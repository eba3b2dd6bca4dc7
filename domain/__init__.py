# domain/__init__.py
"""
Camada de domínio: entidades, exceções e contratos de repositório.
"""
