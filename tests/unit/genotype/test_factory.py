"""
Unit tests for NetworkFactory class.
"""

import pytest

from boardneat.genotype.factory             import NetworkFactory
from boardneat.genotype.innovation_registry import InnovationRegistry
from boardneat.genotype.node_gene           import NodeType


# ============================================================================
# Test: Base Genome
# ============================================================================

class TestCreateBaseGenotype:
    """Test creation of the minimal genome."""

    def test_nodes(self, registry):
        genome = NetworkFactory(registry).create_base_genotype(3, 2)

        assert [n.id for n in genome.input_nodes]  == [0, 1, 2]
        assert [n.id for n in genome.output_nodes] == [3, 4]
        assert genome.hidden_nodes == []
        assert genome.inputs == 3
        assert genome.externals == 5

    def test_seed_connection(self, registry):
        genome = NetworkFactory(registry).create_base_genotype(3, 2)

        assert len(genome.conn_genes) == 1
        conn = genome.conn_genes[0]
        assert conn.endpoints == (0, 3)
        assert conn.weight == 0.0
        assert conn.enabled is True
        assert conn.innovation == registry.lookup(0, 3)

    def test_base_genomes_share_innovation(self, registry):
        factory = NetworkFactory(registry)
        first   = factory.create_base_genotype(126, 9)
        second  = factory.create_base_genotype(126, 9)
        assert first.conn_genes[0].innovation == second.conn_genes[0].innovation
        assert len(registry) == 1

    def test_default_sizes(self, registry):
        genome = NetworkFactory(registry).create_base_genotype(126, 9)
        assert len(genome.node_genes) == 135
        assert genome.conn_genes[0].endpoints == (0, 126)

    @pytest.mark.parametrize("inputs, outputs", [(0, 1), (1, 0), (-1, 3)])
    def test_invalid_counts_raise(self, registry, inputs, outputs):
        with pytest.raises(ValueError, match="at least one input and one output"):
            NetworkFactory(registry).create_base_genotype(inputs, outputs)

    def test_uses_shared_registry_by_default(self):
        genome = NetworkFactory().create_base_genotype(2, 1)
        assert InnovationRegistry.shared().lookup(0, 2) == genome.conn_genes[0].innovation


# ============================================================================
# Test: Base Markings
# ============================================================================

class TestRegisterBaseMarkings:
    """Test registration of every input => output connection."""

    def test_input_major_order(self, registry):
        NetworkFactory(registry).register_base_markings(2, 2)
        assert [(r.source, r.destination) for r in registry.records] == [(0, 2), (0, 3), (1, 2), (1, 3)]

    def test_seed_connection_reuses_marking(self, registry):
        factory = NetworkFactory(registry)
        factory.register_base_markings(3, 2)
        genome = factory.create_base_genotype(3, 2)

        assert genome.conn_genes[0].innovation == 0
        assert len(registry) == 6

    def test_invalid_counts_raise(self, registry):
        with pytest.raises(ValueError):
            NetworkFactory(registry).register_base_markings(0, 2)


# ============================================================================
# Test: Base Recurrent Genome
# ============================================================================

class TestCreateBaseRecurrent:
    """Test creation of the two-node loop."""

    def test_structure(self, registry):
        genome = NetworkFactory(registry).create_base_recurrent()

        assert genome.node_types == {0: NodeType.INPUT, 1: NodeType.OUTPUT}
        assert [c.endpoints for c in genome.conn_genes] == [(0, 1), (1, 0)]
        assert all(c.weight == 0.0 and c.enabled for c in genome.conn_genes)

    def test_innovations_registered_in_order(self, registry):
        genome = NetworkFactory(registry).create_base_recurrent()
        assert [c.innovation for c in genome.conn_genes] == [0, 1]
        assert registry.lookup(1, 0) == 1
