# presentation/console/__init__.py
