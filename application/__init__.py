# application/__init__.py
"""
Camada de aplicação: interfaces consumidas pelo pipeline.
"""
