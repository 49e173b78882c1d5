"""
Network Base Module

This module defines the abstract base class for compiled networks.
It provides a common interface and shared functionality: copying a genome
snapshot into runtime neurons and links, network introspection and
visualization.

Classes:
    Neuron:      A node of a compiled network
    Link:        A weighted connection of a compiled network
    NetworkBase: Abstract base class defining the network interface
"""

from abc    import ABC, abstractmethod
from typing import Any, TYPE_CHECKING
import graphviz  # type: ignore

from boardneat.activations         import activation_codes
from boardneat.genotype.node_gene  import NodeType

if TYPE_CHECKING:
    from boardneat.genotype import Genome

class Neuron:
    """
    A node of a compiled network.

    Public Attributes:
        id:    ID of the node gene the neuron was built from
        type:  Neuron type (INPUT, HIDDEN, or OUTPUT)
        index: Position of the neuron in the network's activation buffers
        depth: Evaluation depth (0 for input neurons)
    """

    def __init__(self, node_id: int, node_type: NodeType, index: int):
        self.id   : int      = node_id
        self.type : NodeType = node_type
        self.index: int      = index
        self.depth: int      = 0

    def __repr__(self):
        return f"Neuron(id={self.id}, type=NodeType.{self.type.name}, depth={self.depth})"

class Link:
    """
    A weighted connection of a compiled network.

    A link is recurrent if its destination is not deeper than its source:
    it then carries the value its source produced during the previous pass.
    Disabled links are kept, so that the network mirrors its genome, but carry nothing.

    Public Attributes:
        source:      ID of the source neuron
        destination: ID of the destination neuron
        weight:      Weight multiplier applied to the transmitted signal
        enabled:     Whether this link is active in the network
        innovation:  Innovation number of the connection gene the link was built from
        recurrent:   Whether the link reads the previous pass
    """

    def __init__(self, source: int, destination: int, weight: float, enabled: bool, innovation: int):
        self.source     : int   = source
        self.destination: int   = destination
        self.weight     : float = weight
        self.enabled    : bool  = enabled
        self.innovation : int   = innovation
        self.recurrent  : bool  = False

    def __repr__(self):
        return (f"Link({self.source} -> {self.destination}, weight={self.weight:+.4f}, "
                f"enabled={self.enabled}, recurrent={self.recurrent})")

class NetworkBase(ABC):
    """
    Abstract base class for compiled networks.

    A network is built from a snapshot of a genome: the neurons and links are
    copies, so later changes to the genome do not affect the network. A network
    must be rebuilt whenever its genome changes.

    Public Properties:
        number_nodes:               Total number of nodes in the network
        number_nodes_hidden:        Number of hidden nodes in the network
        number_connections:         Total number of connections in the network
        number_connections_enabled: Number of enabled connections in the network

    Public Methods:
        propagate(inputs): Process inputs through the network and return outputs (abstract)
        reset():           Forget any state kept between calls (abstract)
        visualize(view):   Draw the network with Graphviz
    """

    def __init__(self, genome: 'Genome', activation_name: str = "sigmoid"):
        """
        Copy the genes of 'genome' into runtime neurons and links.

        Parameters:
            genome:          The Genome encoding the network structure
            activation_name: Name of the activation function of non-input neurons

        Raises:
            ValueError: if a connection references a node the genome does not contain
        """
        self.activation_name = activation_name

        self._neurons: dict[int, Neuron] = {}
        for index, gene in enumerate(sorted(genome.node_genes, key=lambda n: n.id)):
            self._neurons[gene.id] = Neuron(gene.id, gene.type, index)

        self._links: list[Link] = []
        for gene in genome.conn_genes:
            for node_id in gene.endpoints:
                if node_id not in self._neurons:
                    raise ValueError(f"Connection {gene.innovation} references non-existent node {node_id}")
            self._links.append(Link(gene.source, gene.destination, gene.weight, gene.enabled, gene.innovation))

        # Inputs are read, and outputs written, in ascending ID order
        self._input_ids : list[int] = [n.id for n in self._neurons.values() if n.type == NodeType.INPUT]
        self._output_ids: list[int] = [n.id for n in self._neurons.values() if n.type == NodeType.OUTPUT]

    @property
    def number_nodes(self) -> int:
        """Total number of nodes in the network."""
        return len(self._neurons)

    @property
    def number_nodes_hidden(self) -> int:
        """Number of hidden nodes in the network."""
        return len(self._neurons) - len(self._input_ids) - len(self._output_ids)

    @property
    def number_connections(self) -> int:
        """Total number of connections in the network."""
        return len(self._links)

    @property
    def number_connections_enabled(self) -> int:
        """Number of enabled connections in the network."""
        return sum(1 for link in self._links if link.enabled)

    @property
    def number_inputs(self) -> int:
        return len(self._input_ids)

    @property
    def number_outputs(self) -> int:
        return len(self._output_ids)

    @abstractmethod
    def propagate(self, inputs: Any) -> Any:
        """
        Perform a complete forward pass through the network.

        Parameters:
            inputs: Network inputs (as many as input neurons)

        Returns:
            Network outputs (as many as output neurons)
        """
        pass

    @abstractmethod
    def reset(self) -> None:
        """
        Forget the state kept between calls to 'propagate'.
        """
        pass

    def visualize(self, view: bool = True) -> graphviz.Digraph:
        """
        Visualize the network using Graphviz.

        Enabled feed-forward links are drawn black, recurrent links dashed
        and blue, disabled links light gray.

        Parameters:
            view: If True, automatically open the visualization after rendering

        Returns:
            graphviz.Digraph object representing the network
        """
        dot = graphviz.Digraph()
        dot.attr(rankdir='LR')  # Left to right layout
        dot.attr('graph', labelloc='t')

        act_code = activation_codes.get(self.activation_name, '???')

        # Define node colors and shapes
        node_attrs = {
            'INPUT':  {'fillcolor': 'lightgrey', 'color': 'black', 'style': 'filled', 'shape': 'circle', 'penwidth': '0.5', 'fontsize': '5', 'width': '0.5', 'height': '0.5', 'fixedsize': 'true'},
            'HIDDEN': {'fillcolor': 'lightblue', 'color': 'black', 'style': 'filled', 'shape': 'circle', 'penwidth': '0.5', 'fontsize': '5', 'width': '0.5', 'height': '0.5', 'fixedsize': 'true'},
            'OUTPUT': {'fillcolor': 'white'    , 'color': 'black', 'style': 'filled', 'shape': 'circle', 'penwidth': '0.5', 'fontsize': '5', 'width': '0.5', 'height': '0.5', 'fixedsize': 'true'}
        }

        clusters = [('cluster_input',  'source', 'Inputs',  NodeType.INPUT),
                    ('cluster_hidden', 'same',   'Hidden',  NodeType.HIDDEN),
                    ('cluster_output', 'sink',   'Outputs', NodeType.OUTPUT)]

        for name, rank, label, node_type in clusters:
            neurons = [n for n in self._neurons.values() if n.type == node_type]
            if not neurons:
                continue
            with dot.subgraph(name=name) as cluster:
                cluster.attr(rank=rank, label=label, style='invisible')
                for neuron in neurons:
                    attrs = node_attrs[neuron.type.name].copy()
                    if neuron.type == NodeType.INPUT:
                        attrs['label'] = f"id={neuron.id}"
                    else:
                        attrs['label'] = f"id={neuron.id}\\n{act_code}\\ndepth={neuron.depth}"
                    cluster.node(str(neuron.id), **attrs)

        for link in self._links:
            edge_attrs = {
                'label'     : f"i={link.innovation},w={link.weight:.2f}",
                'fontsize'  : '5',
                'penwidth'  : '0.5',
                'arrowsize' : '0.5',
                'labelfloat': 'false'
            }
            if not link.enabled:
                edge_attrs['color'] = 'lightgray'
            elif link.recurrent:
                edge_attrs['color'] = 'blue'
                edge_attrs['style'] = 'dashed'
            else:
                edge_attrs['color'] = 'black'

            dot.edge(str(link.source), str(link.destination), **edge_attrs)

        if view:
            dot.view(cleanup=True)

        return dot

    def __str__(self):
        neurons_str = "\n".join(f"  {neuron!r}" for neuron in self._neurons.values())
        links_str   = "\n".join(f"  {link!r}" for link in self._links)
        return f"{neurons_str}\n\n{links_str}"
