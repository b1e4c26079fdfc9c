"""Contratos del Core (Protocols).

Por qué:
- La fachada de validación depende de la sonda abstracta, no de httpx.
- Los tests inyectan sondas falsas que cumplen el mismo contrato.
"""
