"""
Unit tests for Genome class.

Tests cover gene insertion and node counts, derived properties, cloning,
canonical ordering, and conversion to and from dictionaries.
"""

import pytest
import random

from boardneat.genotype.genome    import Genome
from boardneat.genotype.node_gene import NodeType


# ============================================================================
# Test Fixtures
# ============================================================================

@pytest.fixture
def genome_dict():
    """Dictionary description of a small genome."""
    return {
        'nodes': [
            {'id': 0, 'type': 'input'},
            {'id': 1, 'type': 'output'},
            {'id': 2, 'type': 'hidden'}
        ],
        'connections': [
            {'from': 0, 'to': 1, 'weight': 0.5, 'enabled': False, 'innovation': 0},
            {'from': 0, 'to': 2, 'weight': 1.0, 'enabled': True,  'innovation': 1},
            {'from': 2, 'to': 1, 'weight': 0.5, 'enabled': True,  'innovation': 2}
        ],
        'fitness': 3.5,
        'adjusted_fitness': 1.75
    }


# ============================================================================
# Test: Construction
# ============================================================================

class TestGenomeInit:
    """Test Genome creation and gene insertion."""

    def test_empty_genome(self):
        genome = Genome()
        assert genome.node_genes == []
        assert genome.conn_genes == []
        assert genome.inputs == 0
        assert genome.externals == 0
        assert genome.fitness == 0.0
        assert genome.adjusted_fitness == 0.0

    def test_add_node_updates_counts(self):
        genome = Genome()
        genome.add_node(NodeType.INPUT,  0)
        genome.add_node(NodeType.INPUT,  1)
        genome.add_node(NodeType.OUTPUT, 2)
        genome.add_node(NodeType.HIDDEN, 3)

        assert genome.inputs == 2
        assert genome.externals == 3
        assert len(genome.node_genes) == 4

    def test_add_node_returns_gene(self):
        node = Genome().add_node(NodeType.HIDDEN, 5)
        assert node.id == 5
        assert node.type == NodeType.HIDDEN

    def test_add_connection_keeps_insertion_order(self):
        genome = Genome()
        genome.add_connection(0, 1, 0.5, True, 7)
        genome.add_connection(1, 2, 0.5, True, 3)
        assert [c.innovation for c in genome.conn_genes] == [7, 3]

    def test_add_connection_does_not_check_duplicates(self):
        """Test that pair uniqueness is left to the genetic operators."""
        genome = Genome()
        genome.add_connection(0, 1, 0.5, True, 0)
        genome.add_connection(0, 1, 0.7, True, 0)
        assert len(genome.conn_genes) == 2


# ============================================================================
# Test: Properties
# ============================================================================

class TestGenomeProperties:
    """Test the derived properties of a genome."""

    def test_nodes_by_type(self, sample_genome):
        assert [n.id for n in sample_genome.input_nodes]  == [0, 1]
        assert [n.id for n in sample_genome.output_nodes] == [2]
        assert [n.id for n in sample_genome.hidden_nodes] == [3]

    def test_connections_by_state(self, sample_genome):
        assert [c.innovation for c in sample_genome.enabled_connections]  == [1, 2, 3]
        assert [c.innovation for c in sample_genome.disabled_connections] == [0]

    def test_max_node_id(self, sample_genome):
        assert sample_genome.max_node_id == 3

    def test_max_node_id_of_empty_genome(self):
        assert Genome().max_node_id == -1

    def test_max_innovation_does_not_depend_on_order(self):
        genome = Genome()
        genome.add_connection(0, 1, 0.5, True, 9)
        genome.add_connection(1, 2, 0.5, True, 4)
        assert genome.max_innovation == 9

    def test_max_innovation_without_connections_raises(self):
        with pytest.raises(ValueError, match="no connections"):
            Genome().max_innovation

    def test_node_types(self, sample_genome):
        assert sample_genome.node_types == {0: NodeType.INPUT,
                                            1: NodeType.INPUT,
                                            2: NodeType.OUTPUT,
                                            3: NodeType.HIDDEN}

    def test_has_connection(self, sample_genome):
        assert sample_genome.has_connection(0, 3)
        assert sample_genome.has_connection(0, 2)   # disabled connections count
        assert not sample_genome.has_connection(3, 0)


# ============================================================================
# Test: Cloning
# ============================================================================

class TestGenomeClone:
    """Test that cloning produces an independent deep copy."""

    def test_clone_is_equal(self, sample_genome):
        sample_genome.fitness = 2.0
        sample_genome.adjusted_fitness = 1.0
        clone = sample_genome.clone()
        assert clone.to_dict() == sample_genome.to_dict()
        assert clone.inputs == sample_genome.inputs
        assert clone.externals == sample_genome.externals

    def test_clone_shares_no_gene(self, sample_genome):
        clone = sample_genome.clone()
        original_ids = {id(g) for g in sample_genome.node_genes + sample_genome.conn_genes}
        assert all(id(g) not in original_ids for g in clone.node_genes + clone.conn_genes)

    def test_mutating_clone_leaves_original_unchanged(self, sample_genome):
        before = sample_genome.to_dict()
        clone  = sample_genome.clone()

        clone.conn_genes[1].weight = 99.0
        clone.conn_genes[0].enabled = True
        clone.add_node(NodeType.HIDDEN, 4)

        assert sample_genome.to_dict() == before


# ============================================================================
# Test: Canonical Order
# ============================================================================

class TestGenomeCanonicalize:
    """Test sorting of genes into canonical order."""

    def test_sorts_genes(self):
        genome = Genome()
        genome.add_node(NodeType.HIDDEN, 5)
        genome.add_node(NodeType.INPUT,  0)
        genome.add_node(NodeType.OUTPUT, 1)
        genome.add_connection(5, 1, 0.5, True, 4)
        genome.add_connection(0, 5, 1.0, True, 3)
        genome.add_connection(0, 1, 0.5, False, 0)

        genome.canonicalize()

        assert [n.id for n in genome.node_genes] == [0, 1, 5]
        assert [c.innovation for c in genome.conn_genes] == [0, 3, 4]

    def test_idempotent(self, sample_genome):
        random.shuffle(sample_genome.conn_genes)
        sample_genome.canonicalize()
        once = sample_genome.to_dict()
        sample_genome.canonicalize()
        assert sample_genome.to_dict() == once

    def test_permutation_invariance(self, sample_genome):
        """Test that genomes holding the same genes in any order canonicalize alike."""
        sample_genome.canonicalize()
        expected = sample_genome.to_dict()

        for _ in range(10):
            permuted = Genome()
            nodes = list(sample_genome.node_genes)
            conns = list(sample_genome.conn_genes)
            random.shuffle(nodes)
            random.shuffle(conns)
            for node in nodes:
                permuted.add_node(node.type, node.id)
            for conn in conns:
                permuted.add_connection(conn.source, conn.destination, conn.weight, conn.enabled, conn.innovation)

            permuted.canonicalize()
            assert permuted.to_dict() == expected


# ============================================================================
# Test: Dictionary Conversion
# ============================================================================

class TestGenomeDict:
    """Test to_dict() and from_dict()."""

    def test_from_dict(self, genome_dict):
        genome = Genome.from_dict(genome_dict)

        assert genome.node_types == {0: NodeType.INPUT, 1: NodeType.OUTPUT, 2: NodeType.HIDDEN}
        assert [c.endpoints for c in genome.conn_genes] == [(0, 1), (0, 2), (2, 1)]
        assert genome.conn_genes[0].enabled is False
        assert genome.fitness == 3.5
        assert genome.adjusted_fitness == 1.75
        assert genome.inputs == 1
        assert genome.externals == 2

    def test_to_dict_inverts_from_dict(self, genome_dict):
        assert Genome.from_dict(genome_dict).to_dict() == genome_dict

    def test_fitness_fields_are_optional(self, genome_dict):
        del genome_dict['fitness']
        del genome_dict['adjusted_fitness']
        genome = Genome.from_dict(genome_dict)
        assert genome.fitness == 0.0
        assert genome.adjusted_fitness == 0.0

    def test_unknown_node_type_raises(self, genome_dict):
        genome_dict['nodes'][2]['type'] = 'bias'
        with pytest.raises(ValueError, match="Unknown node type"):
            Genome.from_dict(genome_dict)

    def test_duplicate_node_raises(self, genome_dict):
        genome_dict['nodes'].append({'id': 2, 'type': 'hidden'})
        with pytest.raises(ValueError, match="Duplicate node ID 2"):
            Genome.from_dict(genome_dict)

    def test_dangling_connection_raises(self, genome_dict):
        genome_dict['connections'].append({'from': 2, 'to': 8, 'weight': 1.0, 'enabled': True, 'innovation': 3})
        with pytest.raises(ValueError, match="non-existent destination node: 8"):
            Genome.from_dict(genome_dict)

    def test_duplicate_connection_raises(self, genome_dict):
        genome_dict['connections'].append({'from': 0, 'to': 2, 'weight': 0.1, 'enabled': True, 'innovation': 1})
        with pytest.raises(ValueError, match="Duplicate connection from 0 to 2"):
            Genome.from_dict(genome_dict)

    def test_missing_field_raises(self, genome_dict):
        del genome_dict['connections'][0]['innovation']
        with pytest.raises(KeyError):
            Genome.from_dict(genome_dict)
