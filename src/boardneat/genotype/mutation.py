"""
Mutation Module

This module implements the MutationEngine class, which applies random
structural and numeric changes to a genome.

Classes:
    MutationEngine: Applies every kind of mutation to a genome, stochastically
"""

import logging
import random
from typing import Callable

from boardneat.genotype.connection_gene     import ConnectionGene
from boardneat.genotype.genome              import Genome
from boardneat.genotype.innovation_registry import InnovationRegistry
from boardneat.genotype.node_gene           import NodeType
from boardneat.run.config                   import Config

logger = logging.getLogger(__name__)

class MutationEngine:
    """
    Mutates genomes in place.

    The possible mutations are:
      + mutate the weight of a connection (shift it or replace it)
      + add a connection between two nodes not yet connected
      + add a node by splitting an enabled connection
      + disable an enabled connection
      + enable a disabled connection

    Mutation is best effort: an operator whose candidate set is empty (no
    connection to split, no pair of nodes left to connect, ...) does nothing.
    No operator raises.

    Every new connection gets its innovation number from the registry, so that
    the same connection discovered independently in two genomes can be aligned
    during crossover.

    Public Methods:
        mutate_all(genome):     Apply all possible mutation operations stochastically
        mutate_weight(genome):  Shift or replace the weight of a random connection
        mutate_link(genome):    Add a connection between two unconnected nodes
        mutate_node(genome):    Split a random enabled connection by adding a node
        mutate_disable(genome): Disable a random enabled connection
        mutate_enable(genome):  Enable a random disabled connection
    """

    def __init__(self,
                 config  : Config             | None = None,
                 registry: InnovationRegistry | None = None,
                 rng     : random.Random      | None = None):
        """
        Parameters:
            config:   Stores configuration parameters (defaults if None)
            registry: Ledger of innovation numbers (the process-wide one if None)
            rng:      Source of randomness (the 'random' module if None)
        """
        self._config  : Config             = config   if config   is not None else Config()
        self._registry: InnovationRegistry = registry if registry is not None else InnovationRegistry.shared()
        self._rng                          = rng      if rng      is not None else random

    def mutate_all(self, genome: Genome) -> None:
        """
        Apply to the genome all possible mutation operations.

        The operations are applied in a fixed order: weight, link, node,
        disable, enable. Each is driven by its own rate from the configuration
        through the same loop: while the remaining rate is positive, the
        operation fires with probability equal to the remaining rate, and the
        rate is decreased by one. A rate of 2.0 therefore means two attempts
        that always fire, and a rate of 0.2 a single attempt firing 20% of the time.
        """
        self._repeat(self._config.weight_mutation_rate, self.mutate_weight,  genome)
        self._repeat(self._config.link_add_rate,        self.mutate_link,    genome)
        self._repeat(self._config.node_add_rate,        self.mutate_node,    genome)
        self._repeat(self._config.disable_rate,         self.mutate_disable, genome)
        self._repeat(self._config.enable_rate,          self.mutate_enable,  genome)

    def _repeat(self, rate: float, mutation: Callable[[Genome], None], genome: Genome) -> None:
        p = rate
        while p > 0:
            if self._rng.random() < p:
                mutation(genome)
            p -= 1

    def mutate_weight(self, genome: Genome) -> None:
        """
        Mutate the weight of a connection selected at random.

        The weight is either shifted by a small uniform amount (with
        probability 'perturb_chance') or replaced by a new random value.
        """
        if not genome.conn_genes:
            return

        conn = self._rng.choice(genome.conn_genes)
        if self._rng.random() < self._config.perturb_chance:
            step = self._config.shift_step
            conn.weight += self._rng.random() * step - step * 0.5
        else:
            conn.weight = self._random_weight()

    def mutate_link(self, genome: Genome) -> None:
        """
        Add a new connection between two existing nodes.

        The new connection is selected at random among all the ordered node
        pairs that can be connected. A connection cannot:
         + start at an OUTPUT node
         + end   at an INPUT  node
         + connect a node to itself
         + join two nodes already joined by a connection (enabled or not)
        Connections creating a cycle are allowed: the phenotype evaluates them as recurrent.
        """
        connected = {conn.endpoints for conn in genome.conn_genes}

        candidates = []
        for source in genome.node_genes:
            if source.type == NodeType.OUTPUT:
                continue
            for destination in genome.node_genes:
                if destination.type == NodeType.INPUT:
                    continue
                if source.id == destination.id:
                    continue
                if (source.id, destination.id) in connected:
                    continue
                candidates.append((source.id, destination.id))

        if not candidates:
            logger.debug("no pair of nodes left to connect")
            return

        source, destination = self._rng.choice(candidates)
        weight     = self._random_weight()
        innovation = self._registry.register(source, destination)
        genome.add_connection(source, destination, weight, True, innovation)
        logger.debug("added connection %d -> %d (innovation %d)", source, destination, innovation)

    def mutate_node(self, genome: Genome) -> None:
        """
        Split an existing connection by adding a new node.

        The connection to split is selected at random from all 'enabled'
        connections. It is disabled (never deleted) and replaced by two new
        connections going through a new hidden node:
          + source   => new node, with weight 1.0
          + new node => destination, with the weight of the split connection
        """
        enabled = genome.enabled_connections
        if not enabled:
            logger.debug("no enabled connection to split")
            return

        split: ConnectionGene = self._rng.choice(enabled)
        split.enabled = False

        new_node_id = genome.max_node_id + 1
        innov1 = self._registry.register(split.source, new_node_id)
        innov2 = self._registry.register(new_node_id, split.destination)

        genome.add_node(NodeType.HIDDEN, new_node_id)
        genome.add_connection(split.source, new_node_id,       1.0,          True, innov1)
        genome.add_connection(new_node_id,  split.destination, split.weight, True, innov2)
        logger.debug("split connection %d -> %d with node %d", split.source, split.destination, new_node_id)

    def mutate_disable(self, genome: Genome) -> None:
        """
        Randomly disable a currently enabled connection.
        """
        candidates = genome.enabled_connections
        if candidates:
            self._rng.choice(candidates).enabled = False

    def mutate_enable(self, genome: Genome) -> None:
        """
        Randomly enable a currently disabled connection.
        """
        candidates = genome.disabled_connections
        if candidates:
            self._rng.choice(candidates).enabled = True

    def _random_weight(self) -> float:
        weight_range = self._config.weight_range
        return self._rng.random() * 2 * weight_range - weight_range
