"""
Phenotype Package

This package builds executable networks out of genomes.

Modules:
    network_base:      Neuron and Link classes, abstract base class for all networks
    network_recurrent: Network supporting cycles through recurrent links

Exported Classes:
    Neuron:      A node of a compiled network
    Link:        A weighted connection of a compiled network
    NetworkBase: Abstract base class for networks
    Phenotype:   Network evaluated by depth, with recurrent links
"""

from boardneat.phenotype.network_base      import Neuron, Link, NetworkBase
from boardneat.phenotype.network_recurrent import Phenotype

__all__ = ['Link',
           'NetworkBase',
           'Neuron',
           'Phenotype']
