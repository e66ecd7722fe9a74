# materials/__init__.py
"""
Semiconductor Materials Database for the PL Temperature-Sweep Simulator.

Provides Varshni bandgap parameters for common emitters.

Usage:
    from materials import get_material, MaterialParams, GAAS

    gaas = get_material('GaAs')
    custom = MaterialParams(Eg0=2.3, alpha=5e-4, beta=200.0)
"""

from .params import (
    MaterialParams,
    get_material,
    list_materials,
    SILICON,
    GAAS,
    GAN,
    INGAN_BLUE,
    ALINGAP_RED,
    PEROVSKITE_DEMO,
    MATERIALS_DATABASE,
)

__all__ = [
    'MaterialParams',
    'get_material',
    'list_materials',
    'SILICON',
    'GAAS',
    'GAN',
    'INGAN_BLUE',
    'ALINGAP_RED',
    'PEROVSKITE_DEMO',
    'MATERIALS_DATABASE',
]
