# simulation/plots.py
"""
Figures for PL temperature sweeps (matplotlib, Agg backend).

The two charts of the web demo:
    - Bandgap vs temperature, E_g(T)
    - PL spectrum at one temperature
plus a waterfall overview of the whole sweep.

Every function draws into the given Axes (or a new figure) and returns
the Figure; saving is left to the caller.
"""

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

from .analysis import bandgap_trace


def _axes(ax, figsize):
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
        return fig, ax
    return ax.figure, ax


def plot_bandgap_vs_temperature(spectra, ax=None):
    """E_g(T) line with markers, one point per spectrum."""
    fig, ax = _axes(ax, (7, 5))
    T, E_g = bandgap_trace(spectra)
    ax.plot(T, E_g, 'o-', color='#1f77b4', ms=4, lw=1.5, label='Eg(T)')
    ax.set_xlabel('T (K)', fontsize=12)
    ax.set_ylabel('Eg (eV)', fontsize=12)
    ax.set_title('Bandgap vs Temperature', fontweight='bold')
    ax.grid(True, alpha=0.3); ax.legend()
    fig.tight_layout()
    return fig


def plot_spectrum(spectrum, ax=None):
    """PL spectrum with the bandgap marked."""
    fig, ax = _axes(ax, (7, 5))
    ax.plot(spectrum.energies, spectrum.intensities, color='#d62728', lw=2,
            label='PL Spectrum')
    ax.axvline(spectrum.Eg, color='gray', ls='--', alpha=0.5,
               label=f'Eg = {spectrum.Eg:.4f} eV')
    ax.set_xlabel('Energy (eV)', fontsize=12)
    ax.set_ylabel('Intensity (a.u.)', fontsize=12)
    ax.set_title(f'PL Spectrum at T={spectrum.temperature:.1f} K',
                 fontweight='bold')
    ax.grid(True, alpha=0.3); ax.legend()
    fig.tight_layout()
    return fig


def plot_sweep_overview(spectra, max_curves: int = 12):
    """Side-by-side E_g(T) and a colour-coded stack of spectra."""
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 5))
    plot_bandgap_vs_temperature(spectra, ax=ax1)

    stride = max(1, int(np.ceil(len(spectra) / max_curves)))
    shown = spectra[::stride]
    cmap = plt.get_cmap('coolwarm')
    for k, s in enumerate(shown):
        color = cmap(k / max(1, len(shown) - 1))
        ax2.plot(s.energies, s.intensities, color=color, lw=1.2,
                 label=f'{s.temperature:.0f} K')
    ax2.set_xlabel('Energy (eV)', fontsize=12)
    ax2.set_ylabel('Intensity (a.u.)', fontsize=12)
    ax2.set_title('PL Spectra across the Sweep', fontweight='bold')
    ax2.grid(True, alpha=0.3); ax2.legend(fontsize=8, ncol=2)
    fig.tight_layout()
    return fig
