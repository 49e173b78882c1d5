"""Pytest configuration and shared fixtures."""

import random
import sys
from pathlib import Path

import numpy as np
import pytest

# Add the source directory to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


@pytest.fixture(autouse=True)
def set_random_seeds():
    """Set random seeds for reproducibility."""
    np.random.seed(42)
    random.seed(42)

    yield

    np.random.seed(None)
    random.seed(None)


@pytest.fixture
def registry():
    """A fresh innovation registry, independent of the process-wide one."""
    from boardneat.genotype.innovation_registry import InnovationRegistry
    return InnovationRegistry()


@pytest.fixture
def sample_genome():
    """
    Genome with 2 inputs, 1 hidden node and 1 output:

        0 ---> 3 ---> 2
        1 ---> 3
        0 -----------> 2   (disabled)
    """
    from boardneat.genotype.genome import Genome
    from boardneat.genotype.node_gene import NodeType

    genome = Genome()
    genome.add_node(NodeType.INPUT,  0)
    genome.add_node(NodeType.INPUT,  1)
    genome.add_node(NodeType.OUTPUT, 2)
    genome.add_node(NodeType.HIDDEN, 3)
    genome.add_connection(0, 2,  0.5, False, 0)
    genome.add_connection(0, 3,  1.0, True,  1)
    genome.add_connection(3, 2,  0.5, True,  2)
    genome.add_connection(1, 3, -1.5, True,  3)
    return genome
