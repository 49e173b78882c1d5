"""
Recurrent Network Module

This module implements the Phenotype class, the executable network compiled
from a genome that may contain cycles.

Classes:
    Phenotype: Network evaluated by depth, with recurrent links reading the previous pass
"""

import logging
from collections import defaultdict
from typing      import TYPE_CHECKING
import numpy as np

from boardneat.activations              import activations
from boardneat.genotype.node_gene       import NodeType
from boardneat.phenotype.network_base   import NetworkBase, Link
from boardneat.run.config               import Config

if TYPE_CHECKING:
    from boardneat.genotype import Genome

logger = logging.getLogger(__name__)

class Phenotype(NetworkBase):
    """
    Executable network built from a genome that may contain cycles.

    Every neuron gets a depth. Input neurons have depth 0; any other neuron is
    one deeper than the deepest of its feed-forward predecessors (0 if it has none).
    The depths are computed in two steps:
      1. a depth-first search over the enabled links (starting from the input
         neurons, then from the remaining neurons in ID order) marks as back
         links those reaching a neuron still on the search stack, together with
         any link ending at an input neuron
      2. depths are relaxed over the other enabled links, which form a DAG,
         until they no longer change

    A link is feed-forward if its destination is strictly deeper than its
    source, and recurrent otherwise. Feed-forward links carry the value their
    source produced during the current pass; recurrent links carry the value
    their source produced during the previous pass (0 before the first pass
    and after 'reset').

    Neurons are evaluated in ascending (depth, ID) order, so each pass is
    deterministic given the inputs and the previous pass.

    Public Properties:
        depths:           Dictionary mapping neuron IDs to depths
        evaluation_order: IDs of the non-input neurons, in evaluation order
        number_recurrent: Number of enabled recurrent links

    Public Methods:
        propagate(inputs): Process inputs through the network and return outputs
        reset():           Clear the activations kept from the previous pass

    Class Methods:
        compile(genome, config): Build the phenotype of a genome
    """

    def __init__(self, genome: 'Genome', config: Config | None = None):
        """
        Build the network encoded by 'genome'.

        Parameters:
            genome: The Genome encoding the network structure
            config: Stores configuration parameters (defaults if None)

        Raises:
            ValueError: if a connection references a node the genome does not contain
        """
        config = config if config is not None else Config()
        super().__init__(genome, config.activation)

        self._activation = activations[config.activation]

        self._assign_depths()

        # Non-input neurons are evaluated by depth, ties broken by ID
        computed = [n for n in self._neurons.values() if n.type != NodeType.INPUT]
        self._order: list[int] = [n.id for n in sorted(computed, key=lambda n: (n.depth, n.id))]

        # For each computed neuron: (buffer index of source, weight, recurrent) of its enabled incoming links
        self._incoming: dict[int, list[tuple[int, float, bool]]] = defaultdict(list)
        for link in self._links:
            if link.enabled:
                source = self._neurons[link.source]
                self._incoming[link.destination].append((source.index, link.weight, link.recurrent))

        self._input_index : list[int] = [self._neurons[i].index for i in self._input_ids]
        self._output_index: list[int] = [self._neurons[i].index for i in self._output_ids]

        # Activations of the current and of the previous pass
        self._current : np.ndarray = np.zeros(len(self._neurons))
        self._previous: np.ndarray = np.zeros(len(self._neurons))

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("compiled network: %d neurons, %d links (%d recurrent), max depth %d",
                         self.number_nodes, self.number_connections, self.number_recurrent,
                         max((n.depth for n in self._neurons.values()), default=0))

    @classmethod
    def compile(cls, genome: 'Genome', config: Config | None = None) -> 'Phenotype':
        """
        Build the phenotype of a genome.
        The genes are copied: the network does not change if the genome later does.
        """
        return cls(genome, config)

    def _assign_depths(self) -> None:
        types = {n.id: n.type for n in self._neurons.values()}

        successors: dict[int, list[Link]] = defaultdict(list)
        for link in self._links:
            if link.enabled:
                successors[link.source].append(link)

        ON_STACK, DONE = 1, 2
        state: dict[int, int] = {}
        back_links: set[int]  = set()   # ids of Link objects

        roots = self._input_ids + [n for n in self._neurons if types[n] != NodeType.INPUT]
        for root in roots:
            if root in state:
                continue
            state[root] = ON_STACK
            stack = [(root, iter(successors[root]))]
            while stack:
                node, pending = stack[-1]
                link = next(pending, None)
                if link is None:
                    state[node] = DONE
                    stack.pop()
                    continue
                target = link.destination
                if types[target] == NodeType.INPUT or state.get(target) == ON_STACK:
                    back_links.add(id(link))
                elif target not in state:
                    state[target] = ON_STACK
                    stack.append((target, iter(successors[target])))

        forward = [link for link in self._links if link.enabled and id(link) not in back_links]

        depth = {node_id: 0 for node_id in self._neurons}
        changed = True
        while changed:
            changed = False
            for link in forward:
                if depth[link.source] + 1 > depth[link.destination]:
                    depth[link.destination] = depth[link.source] + 1
                    changed = True

        for node_id, neuron in self._neurons.items():
            neuron.depth = depth[node_id]

        for link in self._links:
            link.recurrent = not depth[link.destination] > depth[link.source]

    @property
    def depths(self) -> dict[int, int]:
        """Dictionary mapping neuron IDs to depths."""
        return {node_id: neuron.depth for node_id, neuron in self._neurons.items()}

    @property
    def evaluation_order(self) -> list[int]:
        """IDs of the non-input neurons, in the order they are evaluated."""
        return list(self._order)

    @property
    def number_recurrent(self) -> int:
        """Number of enabled links evaluated as recurrent."""
        return sum(1 for link in self._links if link.enabled and link.recurrent)

    def propagate(self, inputs) -> list[float]:
        """
        Perform a complete forward pass through the network.

        Parameters:
            inputs: Sequence of input values, assigned to the input neurons in ascending ID order

        Returns:
            List of output values, one per output neuron in ascending ID order

        Raises:
            ValueError: if the number of inputs does not match the number of input neurons
        """
        values = np.asarray(inputs, dtype=float)
        if values.shape != (len(self._input_ids),):
            raise ValueError(f"Expected {len(self._input_ids)} inputs, got {values.size}")

        current, previous = self._current, self._previous
        current.fill(0.0)
        current[self._input_index] = values

        for node_id in self._order:
            total = 0.0
            for source, weight, recurrent in self._incoming[node_id]:
                total += weight * (previous[source] if recurrent else current[source])
            current[self._neurons[node_id].index] = self._activation(total)

        outputs = [float(v) for v in current[self._output_index]]
        previous[:] = current
        return outputs

    def reset(self) -> None:
        """
        Clear the activations kept from the previous pass.
        """
        self._current.fill(0.0)
        self._previous.fill(0.0)
