# utils/constants.py
"""
Physical Constants for the PL Temperature-Sweep Simulator

Fundamental constants (SI) and the energy/wavelength conversions used to
express simulated spectra in nm as well as eV.

References:
    - CODATA 2018 recommended values
"""

import numpy as np

# =============================================================================
# FUNDAMENTAL PHYSICAL CONSTANTS
# =============================================================================

# Electron charge (C)
Q = 1.602176634e-19

# Boltzmann constant (J/K)
K_B = 1.380649e-23

# Planck constant (J·s)
H = 6.62607015e-34

# Speed of light in vacuum (m/s)
C = 299792458.0

# =============================================================================
# DERIVED CONSTANTS
# =============================================================================

# h·c product for wavelength-energy conversion (eV·nm)
HC_EV_NM = (H * C) / Q * 1e9  # ≈ 1239.84 eV·nm

# Boltzmann constant in eV/K
K_B_EV = K_B / Q  # ≈ 8.617e-5 eV/K

ROOM_TEMPERATURE_K = 300.0

# =============================================================================
# UNIT CONVERSION HELPERS
# =============================================================================

def nm_to_eV(wavelength_nm):
    """Convert wavelength (nm) to photon energy (eV)."""
    return HC_EV_NM / np.asarray(wavelength_nm, dtype=np.float64)

def eV_to_nm(energy_eV):
    """Convert photon energy (eV) to wavelength (nm)."""
    return HC_EV_NM / np.asarray(energy_eV, dtype=np.float64)

def thermal_energy_eV(temperature_K):
    """Thermal energy k_B·T in eV."""
    return K_B_EV * temperature_K


if __name__ == "__main__":
    print("Physical Constants Module")
    print("=" * 50)
    print(f"h·c factor:         {HC_EV_NM:.2f} eV·nm")
    print(f"k_B:                {K_B_EV:.4e} eV/K")
    print(f"k_B·T @ 300K:       {thermal_energy_eV(300.0)*1e3:.2f} meV")
    print()
    print("Conversions:")
    print(f"  2.30 eV → {eV_to_nm(2.30):.1f} nm")
    print(f"  1.42 eV → {eV_to_nm(1.42):.1f} nm (GaAs bandgap)")
