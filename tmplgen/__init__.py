"""Case conversion, template values, project names and template locations for a project generator."""

__version__ = "0.1.0"
__all__ = ["__version__"]