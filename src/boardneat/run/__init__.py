"""
Run Package

Configuration shared by the genetic operators and the phenotype.

Exported Classes:
    Config: Configuration parameters, read from an INI file or left at their defaults
"""

from boardneat.run.config import Config

__all__ = ['Config']
