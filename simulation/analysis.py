# simulation/analysis.py
"""
Post-Processing Analysis for PL Temperature Sweeps

Provides tools for:
    - Bandgap trace E_g(T) across a sweep
    - Peak position and measured FWHM of a simulated spectrum
    - Sweep summary (headline numbers for reports / CLI)

Usage:
    from simulation.analysis import bandgap_trace, measure_fwhm

    T, Eg = bandgap_trace(spectra)
    width = measure_fwhm(spectra[0])
"""

from typing import Dict, List, Tuple

import numpy as np
from scipy.signal import peak_widths


# =============================================================================
# BANDGAP TRACE
# =============================================================================

def bandgap_trace(spectra: List) -> Tuple[np.ndarray, np.ndarray]:
    """
    Temperature and bandgap arrays of a sweep, in sweep order.

    Returns:
        (temperatures_K, Eg_eV)
    """
    temperatures = np.array([s.temperature for s in spectra], dtype=np.float64)
    E_g = np.array([s.Eg for s in spectra], dtype=np.float64)
    return temperatures, E_g


def bandgap_shift(spectra: List) -> float:
    """E_g(last) - E_g(first) in eV; 0.0 for fewer than two spectra."""
    if len(spectra) < 2:
        return 0.0
    return spectra[-1].Eg - spectra[0].Eg


# =============================================================================
# LINE ANALYSIS
# =============================================================================

def peak_energy(spectrum) -> float:
    """Energy (eV) of the maximum intensity sample."""
    return float(spectrum.energies[spectrum.peak_index()])


def measure_fwhm(spectrum) -> float:
    """
    Measured full width at half maximum of the emission line.

    Crossings of I_max/2 are linearly interpolated between samples
    (scipy.signal.peak_widths with the zero-intensity baseline), then
    converted from samples to eV with the uniform grid spacing. A line
    wider than the energy window is truncated at the window edges.

    Returns:
        FWHM in eV, or nan for a spectrum without a positive finite peak
    """
    # Writable copy: Spectrum arrays are read-only
    intensities = np.array(spectrum.intensities, dtype=np.float64)
    if len(intensities) < 2 or not np.all(np.isfinite(intensities)):
        return float('nan')

    peak = spectrum.peak_index()
    height = intensities[peak]
    if not height > 0:
        return float('nan')

    # Prominence forced to the absolute peak height -> half maximum, not
    # half prominence
    prominence_data = (np.array([height]), np.array([0]),
                       np.array([len(intensities) - 1]))
    widths, _, _, _ = peak_widths(intensities, [peak], rel_height=0.5,
                                  prominence_data=prominence_data)

    dE = spectrum.energies[1] - spectrum.energies[0]
    return float(widths[0] * dE)


# =============================================================================
# SWEEP SUMMARY
# =============================================================================

def summarize_sweep(spectra: List) -> Dict[str, float]:
    """
    Headline numbers of a sweep.

    Returns:
        Dict with 'n_spectra', 'T_min_K', 'T_max_K', 'Eg_max_eV',
        'Eg_min_eV', 'Eg_shift_meV', 'mean_dEg_dT_meV_per_K',
        'fwhm_meV' (measured on the first spectrum), 'points_per_spectrum'
    """
    if not spectra:
        raise ValueError("Cannot summarize an empty sweep")

    T, E_g = bandgap_trace(spectra)
    shift = bandgap_shift(spectra)
    span = T[-1] - T[0]

    return {
        'n_spectra': len(spectra),
        'T_min_K': float(np.min(T)),
        'T_max_K': float(np.max(T)),
        'Eg_max_eV': float(np.max(E_g)),
        'Eg_min_eV': float(np.min(E_g)),
        'Eg_shift_meV': shift * 1e3,
        'mean_dEg_dT_meV_per_K': shift * 1e3 / span if span else float('nan'),
        'fwhm_meV': measure_fwhm(spectra[0]) * 1e3,
        'points_per_spectrum': len(spectra[0]),
    }
