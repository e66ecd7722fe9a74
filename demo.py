#!/usr/bin/env python3
# demo.py
"""
PL Temperature-Sweep Simulator - Demonstration Script

Walks through the three layers: Varshni bandgap, a single PL spectrum and a
full temperature sweep, using the web demo's default parameters.

Run this script to verify the installation.
"""

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


def main():
    print("=" * 70)
    print("  PL TEMPERATURE-SWEEP SIMULATOR")
    print("  Varshni bandgap + Gaussian emission line")
    print("=" * 70)

    # =========================================================================
    # 1. BANDGAP
    # =========================================================================
    print("\n" + "─" * 70)
    print("1.  VARSHNI BANDGAP")
    print("─" * 70)

    from materials import get_material, MaterialParams
    from physics.bandgap import bandgap_varshni

    for name in ['GaAs', 'Si', 'GaN', 'Perovskite']:
        mat = get_material(name)
        print(f"  {mat.name:42} Eg(0K)={bandgap_varshni(0, mat):.3f}eV  "
              f"Eg(300K)={bandgap_varshni(300, mat):.3f}eV")

    # =========================================================================
    # 2. SINGLE SPECTRUM
    # =========================================================================
    print("\n" + "─" * 70)
    print("2.  PL SPECTRUM AT 300 K")
    print("─" * 70)

    from physics.pl_spectrum import generate_spectrum
    from simulation.config import SimulationConfig
    from simulation.analysis import peak_energy, measure_fwhm

    material = MaterialParams(Eg0=2.3, alpha=0.0005, beta=200.0, name='demo')
    config = SimulationConfig(T_min=100.0, T_max=400.0, steps=4,
                              peak_fwhm=0.05, amplitude=1.0)
    s = generate_spectrum(300.0, material, config)
    print(f"  Eg = {s.Eg:.4f} eV, peak at {peak_energy(s):.4f} eV, "
          f"FWHM = {measure_fwhm(s)*1e3:.1f} meV, {len(s)} points")

    # =========================================================================
    # 3. TEMPERATURE SWEEP
    # =========================================================================
    print("\n" + "─" * 70)
    print("3.  TEMPERATURE SWEEP 100 → 400 K")
    print("─" * 70)

    from simulation.sweep import run_temperature_sweep

    for s in run_temperature_sweep(material, config):
        print(f"    T={s.temperature:5.1f}K: Eg={s.Eg:.4f}eV")

    print("\n" + "=" * 70)
    print("  Done. Try:  python cli.py sweep --preset default")
    print("=" * 70)


if __name__ == "__main__":
    main()
