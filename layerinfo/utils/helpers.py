# -*- coding: utf-8 -*-
"""Helpers , Aren't they useful ?"""

from ..core.arcs import ArcCollection
from ..core.layer import Dataset, Layer
from ..core.table import DataTable


def create_sample_data():
    """Create a small dataset with a parcels (polygon) layer and a wells (point) layer.

    The two parcels share their common edge (arc 1); parcel A has a hole and the third parcel has no geometry.

    Returns:
    --------
    dataset : Dataset
        Dataset in EPSG:4326
    """
    arcs = ArcCollection(
        [
            [(4, 4), (0, 4), (0, 0), (4, 0)],
            [(4, 0), (4, 4)],
            [(4, 0), (6, 0), (6, 4), (4, 4)],
            [(1, 1), (1, 2), (2, 2), (2, 1), (1, 1)],
        ]
    )

    parcels = Layer(
        name="parcels",
        geometry_type="polygon",
        shapes=[[[0, 1], [3]], [[2, ~1]], None],
        data=DataTable(
            [
                {"name": "Parcel A", "area": 15, "zone": "R1", "owners": ["Kim", "Lee"]},
                {"name": "Parcel B", "area": 8.5, "zone": "C2", "owners": []},
                None,
            ]
        ),
    )

    wells = Layer(name="wells", geometry_type="point", shapes=[[[1.5, 3]], [[5, 2], [5.5, 2.5]], None])

    return Dataset(layers=[parcels, wells], arcs=arcs, crs="EPSG:4326")
