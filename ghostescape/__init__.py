"""A small top-down arcade game about escaping waves of ghosts."""

__version__ = "0.1.0"