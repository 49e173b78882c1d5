"""
Connection Gene Module

This module implements the ConnectionGene class.

Classes:
    ConnectionGene: Gene encoding a weighted connection between nodes
"""

class ConnectionGene:
    """
    A gene describing a weighted connection between two nodes in a Neural Network.

    Each connection gene represents a directed edge in the neural network graph,
    connecting a source node to a destination node with an associated weight.
    Connection genes are identified by their innovation number, which serves as
    a historical marker enabling gene alignment during crossover. The innovation
    number never changes after the gene is created, not even when the connection
    is disabled.

    Connections are never deleted, only disabled, so that the ancestry they
    record stays available when genomes are compared.

    Public Attributes:
        source:      ID of the source node
        destination: ID of the destination node
        weight:      Weight of the connection
        enabled:     Whether this connection is active in the network
        innovation:  Global innovation number uniquely identifying this connection
    """

    def __init__(self,
                 source     : int,
                 destination: int,
                 weight     : float,
                 enabled    : bool = True,
                 innovation : int  = 0):
        """
        Parameters:
            source:      ID of the source node
            destination: ID of the destination node
            weight:      Weight of the connection
            enabled:     Whether this connection is active in the network
            innovation:  Number uniquely and globally identifying this connection
        """
        self.source     : int   = source
        self.destination: int   = destination
        self.weight     : float = weight
        self.enabled    : bool  = enabled
        self.innovation : int   = innovation

    @property
    def endpoints(self) -> tuple[int, int]:
        """The (source, destination) pair identifying the connection structurally."""
        return (self.source, self.destination)

    def copy(self) -> 'ConnectionGene':
        return ConnectionGene(self.source, self.destination, self.weight, self.enabled, self.innovation)

    def __eq__(self, other):
        if not isinstance(other, ConnectionGene):
            return NotImplemented
        return (self.source      == other.source      and
                self.destination == other.destination and
                self.weight      == other.weight      and
                self.enabled     == other.enabled     and
                self.innovation  == other.innovation)

    __hash__ = None  # mutable

    def __repr__(self):
        return (f"ConnectionGene(source={self.source:03d}, destination={self.destination:03d}, "
                f"weight={self.weight:+.6f}, enabled={self.enabled}, innovation={self.innovation:03d})")

    def __str__(self):
        s  = f"[{self.innovation:03d},{'E' if self.enabled else 'D'},"
        s += f"{self.source:02d}=>{self.destination:02d},{self.weight:+.02f}]"
        return s
