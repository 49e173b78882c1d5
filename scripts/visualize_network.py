#!/usr/bin/env python3
"""
Utility script to visualize an evolved network.

The genome is read from a JSON file holding the output of 'Genome.to_dict()'.
The network is compiled, so that the drawing shows each neuron's depth and
which links are evaluated as recurrent.

Usage:
    python scripts/visualize_network.py --genome saved_genome.json [--config run.ini]
"""

import sys
import argparse
import json
from pathlib import Path

# Add the source directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from boardneat.genotype import Genome
from boardneat.phenotype import Phenotype
from boardneat.run import Config


def visualize_genome(genome, config=None, output_file='network', format='png', view=True):
    """
    Compile a genome and render its network with Graphviz.

    Args:
        genome: The genome to visualize
        config: Configuration used to compile the network (defaults if None)
        output_file: Output filename (without extension)
        format: Output format (png, pdf, svg, etc.)
        view: Whether to automatically open the generated file
    """
    network = Phenotype.compile(genome, config)

    print(f"Nodes:       {network.number_nodes} ({network.number_nodes_hidden} hidden)")
    print(f"Connections: {network.number_connections} ({network.number_connections_enabled} enabled, "
          f"{network.number_recurrent} recurrent)")
    print(f"Max depth:   {max(network.depths.values(), default=0)}")

    dot = network.visualize(view=False)
    dot.format = format
    dot.render(output_file, view=view, cleanup=True)
    print(f"Network visualization saved to {output_file}.{format}")


def main():
    parser = argparse.ArgumentParser(description='Visualize evolved networks')
    parser.add_argument('--genome', type=str, required=True,
                        help='Path to genome JSON file')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to INI configuration file')
    parser.add_argument('--output', type=str, default='network',
                        help='Output filename (without extension)')
    parser.add_argument('--format', type=str, default='png',
                        choices=['png', 'pdf', 'svg'],
                        help='Output format')
    parser.add_argument('--no-view', action='store_true',
                        help='Do not automatically open the generated file')

    args = parser.parse_args()

    # Load genome
    with open(args.genome, 'r') as f:
        genome_dict = json.load(f)

    try:
        genome = Genome.from_dict(genome_dict)
    except (KeyError, ValueError) as e:
        print(f"Error: {args.genome} does not describe a valid genome ({e})")
        sys.exit(1)

    config = Config(args.config) if args.config else None

    # Visualize
    visualize_genome(genome, config, args.output, args.format, not args.no_view)


if __name__ == '__main__':
    main()
