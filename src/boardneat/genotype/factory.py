"""
Network Factory Module

Creation of the base genomes from which a run starts.

Classes:
    NetworkFactory: Builds base genomes and registers their markings
"""

from boardneat.genotype.genome              import Genome
from boardneat.genotype.innovation_registry import InnovationRegistry
from boardneat.genotype.node_gene           import NodeType

class NetworkFactory:
    """
    Builds the genomes a population starts from.

    Node numbering convention for base genomes:
        - Input nodes:  [0, inputs)
        - Output nodes: [inputs, inputs + outputs)
        - Hidden nodes: created later by mutation, above every existing ID

    Public Methods:
        register_base_markings(inputs, outputs): Register every input => output connection
        create_base_genotype(inputs, outputs):   Minimal genome with a single seed connection
        create_base_recurrent():                 Two-node genome containing a loop
    """

    def __init__(self, registry: InnovationRegistry | None = None):
        """
        Parameters:
            registry: Ledger of innovation numbers (the process-wide one if None)
        """
        self._registry = registry if registry is not None else InnovationRegistry.shared()

    def register_base_markings(self, inputs: int, outputs: int) -> None:
        """
        Register the innovation numbers of all input => output connections,
        input-major, so that every base genome of the run numbers them alike.
        """
        self._validate(inputs, outputs)
        for i in range(inputs):
            for j in range(outputs):
                self._registry.register(i, inputs + j)

    def create_base_genotype(self, inputs: int, outputs: int) -> Genome:
        """
        Create a genome with the given number of input and output nodes and a
        single connection, from the first input to the first output, with weight 0.

        Raises:
            ValueError: if there is not at least one input and one output
        """
        self._validate(inputs, outputs)
        genome = Genome()
        for i in range(inputs):
            genome.add_node(NodeType.INPUT, i)
        for i in range(outputs):
            genome.add_node(NodeType.OUTPUT, inputs + i)

        innovation = self._registry.register(0, inputs)
        genome.add_connection(0, inputs, 0.0, True, innovation)
        return genome

    def create_base_recurrent(self) -> Genome:
        """
        Create the smallest genome containing a loop: input 0 and output 1,
        connected both ways with weight 0.
        """
        genome = Genome()
        genome.add_node(NodeType.INPUT,  0)
        genome.add_node(NodeType.OUTPUT, 1)
        genome.add_connection(0, 1, 0.0, True, self._registry.register(0, 1))
        genome.add_connection(1, 0, 0.0, True, self._registry.register(1, 0))
        return genome

    @staticmethod
    def _validate(inputs: int, outputs: int) -> None:
        if inputs < 1 or outputs < 1:
            raise ValueError(f"A network needs at least one input and one output, got {inputs} and {outputs}")
