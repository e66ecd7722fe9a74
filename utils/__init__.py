# utils/__init__.py
"""
Utility modules for the PL Temperature-Sweep Simulator.
"""

from .constants import (
    Q,
    K_B,
    K_B_EV,
    H,
    C,
    HC_EV_NM,
    ROOM_TEMPERATURE_K,
    nm_to_eV,
    eV_to_nm,
    thermal_energy_eV,
)

__all__ = [
    'Q',
    'K_B',
    'K_B_EV',
    'H',
    'C',
    'HC_EV_NM',
    'ROOM_TEMPERATURE_K',
    'nm_to_eV',
    'eV_to_nm',
    'thermal_energy_eV',
]
