"""
Genome Module

This module implements the Genome class, the genetic encoding of one
candidate controller.

Classes:
    Genome: Complete genome representing a neural network structure
"""

from boardneat.genotype.connection_gene import ConnectionGene
from boardneat.genotype.node_gene       import NodeType, NodeGene

class Genome:
    """
    A genome representing a neural network as a collection of node and connection genes.

    A genome encodes the structure and parameters of a neural network at the
    genotype level. It consists of:
    - Node genes: describe network nodes (input, hidden, output)
    - Connection genes: describe weighted connections between nodes, each with a
      unique innovation number for tracking historical markings during crossover

    Unlike a feedforward-only encoding, a genome may describe cycles: the
    phenotype decides which connections are evaluated as recurrent.

    The genome itself enforces no structural invariant: 'add_connection' does
    not check that its (source, destination) pair is new. The mutation and
    crossover engines are responsible for never creating a duplicate pair.

    Both gene lists are ordered. The order in which genes are added is
    preserved until 'canonicalize()' is called, which sorts nodes by ID and
    connections by innovation number. Genomes must be canonicalized before
    they are compared or serialized.

    Public Attributes:
        node_genes:       List of NodeGene objects
        conn_genes:       List of ConnectionGene objects
        inputs:           Number of input nodes (maintained by 'add_node')
        externals:        Number of non-hidden nodes (maintained by 'add_node')
        fitness:          Raw fitness, written by the simulation driver
        adjusted_fitness: Fitness adjusted for species crowding, written by the population manager

    Public Properties:
        input_nodes:          List of all input node genes
        output_nodes:         List of all output node genes
        hidden_nodes:         List of all hidden node genes
        enabled_connections:  List of all enabled connection genes
        disabled_connections: List of all disabled connection genes
        max_node_id:          Largest node ID in the genome
        max_innovation:       Largest innovation number in the genome
        node_types:           Dictionary mapping node IDs to node types

    Public Methods:
        add_node(node_type, node_id):                  Append a node gene
        add_connection(source, destination, ...):      Append a connection gene
        has_connection(source, destination):           Whether a connection joins the two nodes
        clone():                                       Deep copy of this genome
        canonicalize():                                Sort the genes into canonical order
        to_dict():                                     Convert genome to dictionary representation

    Class Methods:
        from_dict(genome_dict): Create a genome from a dictionary description
    """

    def __init__(self):
        """
        Initialize an empty Genome (no node or connection genes).
        Use the NetworkFactory to create the base genomes of a population.
        """
        self.node_genes: list[NodeGene]       = []
        self.conn_genes: list[ConnectionGene] = []

        # Node counts, kept up to date by 'add_node'
        self.inputs   : int = 0
        self.externals: int = 0

        self.fitness         : float = 0.0
        self.adjusted_fitness: float = 0.0

    def add_node(self, node_type: NodeType, node_id: int) -> NodeGene:
        """
        Append a node gene to the genome.

        Parameters:
            node_type: Type of node (INPUT, HIDDEN, or OUTPUT)
            node_id:   ID of the node (must not be used already in this genome)

        Returns:
            the new node gene
        """
        node = NodeGene(node_id, node_type)
        self.node_genes.append(node)

        if node_type != NodeType.HIDDEN:
            self.externals += 1
        if node_type == NodeType.INPUT:
            self.inputs += 1

        return node

    def add_connection(self,
                       source     : int,
                       destination: int,
                       weight     : float,
                       enabled    : bool = True,
                       innovation : int  = 0) -> ConnectionGene:
        """
        Append a connection gene to the genome.
        The caller guarantees that no connection joins 'source' to 'destination' yet.

        Parameters:
            source:      ID of the source node
            destination: ID of the destination node
            weight:      Weight of the connection
            enabled:     Whether this connection is active in the network
            innovation:  Innovation number of the connection

        Returns:
            the new connection gene
        """
        conn = ConnectionGene(source, destination, weight, enabled, innovation)
        self.conn_genes.append(conn)
        return conn

    @property
    def input_nodes(self) -> list[NodeGene]:
        return [node for node in self.node_genes if node.type == NodeType.INPUT]

    @property
    def output_nodes(self) -> list[NodeGene]:
        return [node for node in self.node_genes if node.type == NodeType.OUTPUT]

    @property
    def hidden_nodes(self) -> list[NodeGene]:
        return [node for node in self.node_genes if node.type == NodeType.HIDDEN]

    @property
    def enabled_connections(self) -> list[ConnectionGene]:
        return [conn for conn in self.conn_genes if conn.enabled]

    @property
    def disabled_connections(self) -> list[ConnectionGene]:
        return [conn for conn in self.conn_genes if not conn.enabled]

    @property
    def max_node_id(self) -> int:
        """Largest node ID in the genome (-1 if the genome has no nodes)."""
        return max((node.id for node in self.node_genes), default=-1)

    @property
    def max_innovation(self) -> int:
        """
        Largest innovation number in the genome.

        Raises:
            ValueError: if the genome has no connections
        """
        if not self.conn_genes:
            raise ValueError("Genome has no connections, its largest innovation number is undefined")
        return max(conn.innovation for conn in self.conn_genes)

    @property
    def node_types(self) -> dict[int, NodeType]:
        return {node.id: node.type for node in self.node_genes}

    def has_connection(self, source: int, destination: int) -> bool:
        """
        Whether a connection (enabled or not) goes from 'source' to 'destination'.
        """
        return any(conn.source == source and conn.destination == destination for conn in self.conn_genes)

    def clone(self) -> 'Genome':
        """
        Create a deep copy of this genome.

        The copy is built by adding the genes one at a time, so that its
        node counts are maintained the same way as for any other genome.
        """
        copy = Genome()
        for node in self.node_genes:
            copy.add_node(node.type, node.id)
        for conn in self.conn_genes:
            copy.add_connection(conn.source, conn.destination, conn.weight, conn.enabled, conn.innovation)

        copy.fitness          = self.fitness
        copy.adjusted_fitness = self.adjusted_fitness
        return copy

    def canonicalize(self) -> None:
        """
        Sort the node genes by ID and the connection genes by innovation number.
        Both sorts are stable, so canonicalizing twice is the same as canonicalizing once.
        """
        self.node_genes.sort(key=lambda node: node.id)
        self.conn_genes.sort(key=lambda conn: conn.innovation)

    def to_dict(self) -> dict:
        """
        Convert the genome to a dictionary representation.

        This is the inverse operation of from_dict(). Genes appear in their
        current order, call 'canonicalize()' first to get a canonical result.

        Returns:
            Dictionary with the following structure:
            {
                "nodes": [
                    {"id": 0, "type": "input"},
                    {"id": 1, "type": "output"},
                    {"id": 2, "type": "hidden"}
                ],
                "connections": [
                    {"from": 0, "to": 2, "weight": 1.0, "enabled": true,  "innovation": 1},
                    {"from": 2, "to": 1, "weight": 0.5, "enabled": true,  "innovation": 2},
                    {"from": 0, "to": 1, "weight": 0.5, "enabled": false, "innovation": 0}
                ],
                "fitness": 0.0,
                "adjusted_fitness": 0.0
            }
        """
        nodes = [{"id": node.id, "type": node.type.label} for node in self.node_genes]

        connections = []
        for conn in self.conn_genes:
            connections.append({
                "from"      : conn.source,
                "to"        : conn.destination,
                "weight"    : conn.weight,
                "enabled"   : conn.enabled,
                "innovation": conn.innovation
            })

        return {
            "nodes"           : nodes,
            "connections"     : connections,
            "fitness"         : self.fitness,
            "adjusted_fitness": self.adjusted_fitness
        }

    @classmethod
    def from_dict(cls, genome_dict: dict) -> 'Genome':
        """
        Create a Genome from a dictionary description (see 'to_dict()').

        Innovation numbers are taken verbatim from the dictionary, they are not
        re-registered: the ledger of the run they come from must be restored
        separately (see 'InnovationRegistry.from_list').

        Parameters:
            genome_dict: Dictionary describing the genome structure

        Returns:
            A new Genome object with the specified structure

        Raises:
            ValueError: If the structure is invalid (unknown node type, duplicate
                        node IDs or connections, dangling connections)
            KeyError:   If required fields are missing from the dictionary
        """
        genome = cls()

        node_ids = set()
        for node_data in genome_dict["nodes"]:
            node_id   = int(node_data["id"])
            node_type = NodeType.from_label(node_data["type"])
            if node_id in node_ids:
                raise ValueError(f"Duplicate node ID {node_id} in node list")
            node_ids.add(node_id)
            genome.add_node(node_type, node_id)

        endpoints = set()
        for conn_data in genome_dict.get("connections", []):
            source      = int(conn_data["from"])
            destination = int(conn_data["to"])

            # Validate that nodes exist
            if source not in node_ids:
                raise ValueError(f"Connection references non-existent source node: {source}")
            if destination not in node_ids:
                raise ValueError(f"Connection references non-existent destination node: {destination}")

            if (source, destination) in endpoints:
                raise ValueError(f"Duplicate connection from {source} to {destination}")
            endpoints.add((source, destination))

            genome.add_connection(source,
                                  destination,
                                  float(conn_data["weight"]),
                                  bool(conn_data.get("enabled", True)),
                                  int(conn_data["innovation"]))

        genome.fitness          = float(genome_dict.get("fitness", 0.0))
        genome.adjusted_fitness = float(genome_dict.get("adjusted_fitness", 0.0))
        return genome

    def __str__(self):
        node_genes_str = ''.join(str(node) for node in self.node_genes)
        conn_genes_str = ''.join(str(conn) for conn in self.conn_genes)
        return f"Nodes: {node_genes_str}\nConns: {conn_genes_str}"

    def __repr__(self):
        return f"Genome(nodes={len(self.node_genes)}, connections={len(self.conn_genes)})"
