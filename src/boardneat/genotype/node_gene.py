"""
Node Gene Module.

This module implements the NodeGene class and NodeType enumeration.

Classes:
    NodeType: Enumeration for node types (INPUT, HIDDEN, OUTPUT)
    NodeGene: Gene encoding a single network node
"""

from enum import Enum

class NodeType(Enum):
    """
    Nodes come in three types: input, hidden, output.
    """
    INPUT  = "I"
    HIDDEN = "H"
    OUTPUT = "O"

    @property
    def label(self) -> str:
        """Lower-case name used when a genome is converted to a dictionary."""
        return self.name.lower()

    @classmethod
    def from_label(cls, label: str) -> 'NodeType':
        """
        Inverse of 'label'.

        Raises:
            ValueError: if 'label' does not name a node type
        """
        try:
            return cls[label.upper()]
        except KeyError:
            raise ValueError(f"Unknown node type '{label}'") from None

class NodeGene:
    """
    A gene describing a node in a Neural Network.

    The ID of a node is not positional: it is reused verbatim by every genome
    descending from the genome in which the node first appeared. Input and
    output IDs are fixed for the whole run, hidden nodes always receive an
    ID larger than any other ID in the genome that creates them.

    Public Attributes:
        id:   Unique identifier for this node (unique within its genome)
        type: Type of node (INPUT, HIDDEN, or OUTPUT)
    """

    def __init__(self, node_id: int, node_type: NodeType):
        """
        Parameters:
            node_id:   Unique identifier for this node
            node_type: Type of node (INPUT, HIDDEN, or OUTPUT)
        """
        self.id  : int      = node_id
        self.type: NodeType = node_type

    def copy(self) -> 'NodeGene':
        return NodeGene(self.id, self.type)

    def __eq__(self, other):
        if not isinstance(other, NodeGene):
            return NotImplemented
        return self.id == other.id and self.type == other.type

    def __hash__(self):
        return hash((self.id, self.type))

    def __repr__(self):
        return f"NodeGene(node_id={self.id:03d}, node_type=NodeType.{self.type.name})"

    def __str__(self):
        return f"[{self.type.value}{self.id}]"
