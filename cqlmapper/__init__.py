from .connection import Connection


__version__ = '0.1.0'
