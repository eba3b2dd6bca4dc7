# infrastructure/__init__.py
"""
Implementações concretas das interfaces da aplicação.
"""
