# simulation/__init__.py
"""
Simulation Module for the PL Temperature-Sweep Simulator

Provides the sweep driver and everything around it:
    - SimulationConfig: sweep configuration + JSON presets
    - run_temperature_sweep: one spectrum per temperature step
    - SweepSession: sweep result with a selected-spectrum cursor
    - Analysis: E_g(T) trace, peak position, measured FWHM
    - Export: CSV text of spectra and of E_g(T)

Figures live in simulation.plots (imports matplotlib).
"""

from .config import SimulationConfig
from .sweep import run_temperature_sweep
from .session import SweepSession
from .analysis import (
    bandgap_trace,
    bandgap_shift,
    peak_energy,
    measure_fwhm,
    summarize_sweep,
)
from .export import sweep_to_csv, bandgap_to_csv

__all__ = [
    'SimulationConfig',
    'run_temperature_sweep',
    'SweepSession',
    'bandgap_trace',
    'bandgap_shift',
    'peak_energy',
    'measure_fwhm',
    'summarize_sweep',
    'sweep_to_csv',
    'bandgap_to_csv',
]
