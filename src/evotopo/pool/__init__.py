"""
NEAT Pool Package

Exported Classes:
    Population: Owner of the genomes and of their shared innovation history
"""

from evotopo.pool.population import Population

__all__ = ['Population']
