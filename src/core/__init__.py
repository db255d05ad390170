"""Core de httpeek: configuración, modelos de dominio y parsing de argumentos.

El Core no conoce la CLI ni el renderizado; solo conceptos del problema.
"""

__version__ = "0.1.0"
