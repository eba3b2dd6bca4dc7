# domain/entities/__init__.py
"""
Entidades do domínio: negócios, agregados por mercado e diagnóstico da execução.
"""
