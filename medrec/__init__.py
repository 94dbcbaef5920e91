"""Student clinic-visit register with a console menu and DES file encryption."""

__version__ = "0.1.0"

__all__ = ["__version__"]