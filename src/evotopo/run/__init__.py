"""
NEAT Run Package

Exported Classes:
    Config:           Configuration parameters, parsed from an INI file
    EvolutionContext: Owner of the mutation operators
"""

from evotopo.run.config  import Config
from evotopo.run.context import EvolutionContext

__all__ = ['Config', 'EvolutionContext']
