"""Scanner, symbol table and identifier checks for the KPL teaching language."""

__version__ = "0.1.0"