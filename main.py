# -*- coding: utf-8 -*-
"""Testing Working Document!

Just a workspace document to try the library on the sample data or on a vector file.
"""

import logging
import os

from layerinfo import (
    count_rings,
    create_sample_data,
    get_dataset_info,
    get_simplification_info,
    read_vector,
    setup_logging,
)


def run_example(vector_path=None):
    """Run Example."""
    setup_logging(logging.INFO)

    if vector_path:
        if not os.path.exists(vector_path):
            raise ValueError(f"Vector file not found at {vector_path}. Please provide a valid vector file.")
        print(f"Reading vector data from {vector_path}...")
        dataset = read_vector(vector_path)
    else:
        print("Using sample data...")
        dataset = create_sample_data()

    print(f"Layers: {dataset.get_layer_names()}")
    print(f"Coordinate system: {dataset.crs}")

    print()
    print(get_dataset_info(dataset, target_layers=dataset.layers[:1]))

    if dataset.arcs is not None:
        print("\nTopology:")
        info = get_simplification_info(dataset.arcs)
        print(f"  Arcs: {dataset.arcs.size()}")
        print(f"  Nodes: {info['node_count']}")
        print(f"  Interior vertices: {info['interior_vertex_count']}")

        for layer in dataset.layers:
            if layer.geometry_type == "polygon":
                counts = count_rings(layer.shapes, dataset.arcs)
                print(f"  {layer.name}: {counts.rings} rings, {counts.holes} holes")


if __name__ == "__main__":
    # run_example("data/parcels.geojson")

    run_example()
