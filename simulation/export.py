# simulation/export.py
"""
CSV serialisation of sweep results.

Functions return text; writing it to a file, a download or a socket is
up to the caller. Numbers are written with full round-trip precision.

Layouts:
    long   one row per sample: temperature_K,Eg_eV,energy_eV,intensity
    pairs  one line per spectrum: T=<temperature>,E:I,E:I,...
           (the layout of the web demo's "Export CSV" button)
"""

import csv
import io
from typing import List

CSV_LAYOUTS = ('long', 'pairs')


def _num(value) -> str:
    return repr(float(value))


def sweep_to_csv(spectra: List, layout: str = 'long') -> str:
    """
    Serialise a list of spectra to CSV text.

    Args:
        spectra: Spectra from run_temperature_sweep
        layout: 'long' or 'pairs'

    Returns:
        CSV text ('' for an empty sweep in 'pairs' layout)

    Raises:
        ValueError: Unknown layout
    """
    if layout not in CSV_LAYOUTS:
        raise ValueError(f"Unknown CSV layout '{layout}'. Use one of {CSV_LAYOUTS}")

    if layout == 'pairs':
        lines = []
        for s in spectra:
            pairs = (f"{_num(e)}:{_num(i)}" for e, i in zip(s.energies, s.intensities))
            lines.append(','.join([f"T={_num(s.temperature)}", *pairs]))
        return '\n'.join(lines)

    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator='\n')
    writer.writerow(['temperature_K', 'Eg_eV', 'energy_eV', 'intensity'])
    for s in spectra:
        T, E_g = _num(s.temperature), _num(s.Eg)
        for e, i in zip(s.energies, s.intensities):
            writer.writerow([T, E_g, _num(e), _num(i)])
    return buf.getvalue()


def bandgap_to_csv(spectra: List) -> str:
    """E_g(T) table as CSV text: temperature_K,Eg_eV."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator='\n')
    writer.writerow(['temperature_K', 'Eg_eV'])
    for s in spectra:
        writer.writerow([_num(s.temperature), _num(s.Eg)])
    return buf.getvalue()
