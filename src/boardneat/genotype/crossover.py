"""
Crossover Module

This module implements gene alignment, crossover and the speciation distance.

Classes:
    Alignment:       Two genomes' connection genes, classified by innovation number
    CrossoverEngine: Produces offspring and measures the distance between genomes
"""

import logging
import math
import random
from dataclasses import dataclass, field

from boardneat.genotype.connection_gene import ConnectionGene
from boardneat.genotype.genome          import Genome
from boardneat.genotype.node_gene       import NodeType
from boardneat.run.config               import Config

logger = logging.getLogger(__name__)

@dataclass
class Alignment:
    """
    The connection genes of two genomes ('first' and 'second'), aligned by innovation number.

    Connection genes present in both genomes are matching; they are stored
    pairwise, so that 'matching_first[i]' and 'matching_second[i]' share their
    innovation number. The threshold is the smaller of the two genomes' largest
    innovation numbers. A gene found in one genome only is excess if its
    innovation number is above the threshold, otherwise it is disjoint.

    Every connection gene of each genome belongs to exactly one of its three lists.
    The genes are not copied: they belong to the aligned genomes.
    """
    threshold      : int
    matching_first : list[ConnectionGene] = field(default_factory=list)
    matching_second: list[ConnectionGene] = field(default_factory=list)
    disjoint_first : list[ConnectionGene] = field(default_factory=list)
    disjoint_second: list[ConnectionGene] = field(default_factory=list)
    excess_first   : list[ConnectionGene] = field(default_factory=list)
    excess_second  : list[ConnectionGene] = field(default_factory=list)

    @property
    def num_matching(self) -> int:
        return len(self.matching_first)

    @property
    def num_disjoint(self) -> int:
        return len(self.disjoint_first) + len(self.disjoint_second)

    @property
    def num_excess(self) -> int:
        return len(self.excess_first) + len(self.excess_second)

class CrossoverEngine:
    """
    Recombines and compares genomes using their historical markings.

    Genes are aligned through their innovation numbers: there is no need to
    test the two networks for topological isomorphism.

    Public Methods:
        align(first, second):     Classify the connection genes of two genomes
        offspring(fitter, other): Create a new genome by crossing two parents
        distance(first, second):  Calculate the speciation distance between two genomes
    """

    def __init__(self, config: Config | None = None, rng: random.Random | None = None):
        """
        Parameters:
            config: Stores configuration parameters (defaults if None)
            rng:    Source of randomness (the 'random' module if None)
        """
        self._config: Config = config if config is not None else Config()
        self._rng            = rng    if rng    is not None else random

    @staticmethod
    def align(first: Genome, second: Genome) -> Alignment:
        """
        Align the connection genes of two genomes by innovation number.

        Parameters:
            first:  a genome with at least one connection gene
            second: a genome with at least one connection gene

        Returns:
            the classification of all connection genes of both genomes

        Raises:
            ValueError: if either genome has no connection genes
        """
        if not first.conn_genes or not second.conn_genes:
            raise ValueError("Cannot align a genome that has no connections")

        alignment = Alignment(threshold=min(first.max_innovation, second.max_innovation))

        second_by_innov = {conn.innovation: conn for conn in second.conn_genes}
        matched_innovs  = set()

        for conn in first.conn_genes:
            partner = second_by_innov.get(conn.innovation)
            if partner is not None:
                alignment.matching_first.append(conn)
                alignment.matching_second.append(partner)
                matched_innovs.add(conn.innovation)
            elif conn.innovation > alignment.threshold:
                alignment.excess_first.append(conn)
            else:
                alignment.disjoint_first.append(conn)

        for conn in second.conn_genes:
            if conn.innovation in matched_innovs:
                continue
            if conn.innovation > alignment.threshold:
                alignment.excess_second.append(conn)
            else:
                alignment.disjoint_second.append(conn)

        return alignment

    def offspring(self, fitter: Genome, other: Genome) -> Genome:
        """
        Perform crossover between two genomes to create offspring.

        Crossover rules:
        - Matching genes: if the copy in 'other' is disabled, it is inherited (so the
          child keeps the gene disabled); otherwise a coin flip picks either parent's copy
        - Disjoint/excess genes: inherited from 'fitter' only
        - Nodes: all input and output nodes of 'fitter', plus a hidden node for every
          other node referenced by the inherited connections

        Every inherited gene is copied: the offspring shares no gene object with its parents.

        Parameters:
            fitter: the fitter parent, contributing its disjoint and excess genes
            other:  the other parent

        Returns:
            New offspring genome, canonicalized

        Raises:
            ValueError: if either parent has no connection genes
        """
        alignment = self.align(fitter, other)
        child     = Genome()

        # Decide which connections are part of the new network first: the ends
        # of these connections give the hidden nodes of the new network.
        for conn_fitter, conn_other in zip(alignment.matching_first, alignment.matching_second):
            if not conn_other.enabled or self._rng.randrange(2) == 1:
                chosen = conn_other
            else:
                chosen = conn_fitter
            child.add_connection(chosen.source, chosen.destination, chosen.weight, chosen.enabled, chosen.innovation)

        for conn in alignment.disjoint_first + alignment.excess_first:
            child.add_connection(conn.source, conn.destination, conn.weight, conn.enabled, conn.innovation)

        # Input and output nodes have the same meaning in every genome of the run.
        present = set()
        for node in fitter.node_genes:
            if node.type != NodeType.HIDDEN:
                child.add_node(node.type, node.id)
                present.add(node.id)

        for conn in child.conn_genes:
            for node_id in conn.endpoints:
                if node_id not in present:
                    child.add_node(NodeType.HIDDEN, node_id)
                    present.add(node_id)

        child.canonicalize()
        logger.debug("offspring: %d matching, %d disjoint, %d excess genes inherited",
                     alignment.num_matching, len(alignment.disjoint_first), len(alignment.excess_first))
        return child

    def distance(self, first: Genome, second: Genome) -> float:
        """
        Calculate the speciation distance between two genomes.

           distance = (c1 * E / N) + (c2 * D / N) + c3 * W

        Where:
        - E = number of excess connection genes (both genomes)
        - D = number of disjoint connection genes (both genomes)
        - N = number of connection genes in larger genome
        - W = average absolute weight difference of matching connection genes
              (0 if there is no matching gene)
        - c1, c2, c3 = weight of various terms (from configuration file)

        The result does not depend on the order of the arguments.

        Parameters:
            first:  a genome with at least one connection gene
            second: a genome with at least one connection gene

        Returns:
            the speciation distance between the two genomes

        Raises:
            ValueError: if either genome has no connection genes
        """
        alignment = self.align(first, second)

        avg_weight_diff = 0.0
        if alignment.num_matching:
            weight_diff     = math.fsum(abs(a.weight - b.weight)
                                        for a, b in zip(alignment.matching_first, alignment.matching_second))
            avg_weight_diff = weight_diff / alignment.num_matching

        N = max(len(first.conn_genes), len(second.conn_genes))
        return (self._config.distance_excess_coeff   * alignment.num_excess   / N +
                self._config.distance_disjoint_coeff * alignment.num_disjoint / N +
                self._config.distance_weight_coeff   * avg_weight_diff)
