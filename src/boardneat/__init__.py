"""
boardneat - NEAT neuroevolution for board-game playing agents.

This package implements the core of the NEAT algorithm (NeuroEvolution of
Augmenting Topologies), which evolves the players of a property-trading
board game: genomes that grow in structure over generations, the genetic
operators acting on them, and the recurrent networks they compile into.

Main components:
- genotype: Genetic encoding (genomes, genes, innovation registry, mutation, crossover)
- phenotype: Executable networks compiled from genomes, possibly recurrent
- players: Decision interface of the board game, fixed-policy and network-driven players
- run: Configuration
- activations: Activation functions for neural networks

Example:
    >>> from boardneat import Config, NetworkFactory, MutationEngine, Phenotype
    >>> config  = Config()
    >>> factory = NetworkFactory()
    >>> genome  = factory.create_base_genotype(config.num_inputs, config.num_outputs)
    >>> MutationEngine(config).mutate_all(genome)
    >>> network = Phenotype.compile(genome, config)
    >>> outputs = network.propagate([0.0] * config.num_inputs)
"""

__version__ = "0.1.0"

# Import main classes for convenient access
from boardneat.run.config import Config
from boardneat.genotype.genome import Genome
from boardneat.genotype.node_gene import NodeType, NodeGene
from boardneat.genotype.connection_gene import ConnectionGene
from boardneat.genotype.innovation_registry import InnovationRegistry
from boardneat.genotype.mutation import MutationEngine
from boardneat.genotype.crossover import CrossoverEngine
from boardneat.genotype.factory import NetworkFactory
from boardneat.phenotype.network_recurrent import Phenotype
from boardneat.players.base import Player
from boardneat.players.neural import NeuralPlayer

__all__ = [
    "Config",
    "Genome",
    "NodeType",
    "NodeGene",
    "ConnectionGene",
    "InnovationRegistry",
    "MutationEngine",
    "CrossoverEngine",
    "NetworkFactory",
    "Phenotype",
    "Player",
    "NeuralPlayer",
]
