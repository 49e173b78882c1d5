"""
Genotype Package

This package implements the genotype representation of the evolving
controllers, and the genetic operators acting on it.

A genotype consists of two types of genes:
- Node genes:       Encode individual neurons (input, hidden or output)
- Connection genes: Encode weighted connections between neurons, with innovation numbers

Modules:
    node_gene:           NodeType enumeration and NodeGene class
    connection_gene:     ConnectionGene class
    genome:              Genome class
    innovation_registry: Innovation and InnovationRegistry classes
    mutation:            MutationEngine class
    crossover:           Alignment and CrossoverEngine classes
    factory:             NetworkFactory class

Exported Classes:
    NodeType:           Enumeration for node types (INPUT, HIDDEN, OUTPUT)
    NodeGene:           Gene encoding a single network node
    ConnectionGene:     Gene encoding a weighted connection between nodes
    Genome:             Complete genome representing a neural network
    Innovation:         Entry of the innovation ledger
    InnovationRegistry: Global ledger of innovation numbers
    MutationEngine:     Applies mutations to a genome
    Alignment:          Connection genes of two genomes classified by innovation number
    CrossoverEngine:    Crossover and speciation distance
    NetworkFactory:     Builds base genomes
"""

from boardneat.genotype.connection_gene     import ConnectionGene
from boardneat.genotype.crossover           import Alignment, CrossoverEngine
from boardneat.genotype.factory             import NetworkFactory
from boardneat.genotype.genome              import Genome
from boardneat.genotype.innovation_registry import Innovation, InnovationRegistry
from boardneat.genotype.mutation            import MutationEngine
from boardneat.genotype.node_gene           import NodeType, NodeGene

__all__ = ['Alignment',
           'ConnectionGene',
           'CrossoverEngine',
           'Genome',
           'Innovation',
           'InnovationRegistry',
           'MutationEngine',
           'NetworkFactory',
           'NodeGene',
           'NodeType']
