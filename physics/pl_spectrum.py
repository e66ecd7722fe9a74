# =============================================================================
# physics/pl_spectrum.py — Synthetic Photoluminescence Spectrum
# =============================================================================
# A PL spectrum at temperature T is a single Gaussian emission line centred
# on the Varshni bandgap E_g(T):
#
#   I(E) = A · exp( -0.5·((E - E_g)/σ)² ),   E ∈ [E_g - W, E_g + W]
#
# sampled at N evenly spaced energies (both window edges included). The
# line width is the intrinsic FWHM broadened in quadrature by the
# instrument resolution; the peak height stays A.
# =============================================================================

import logging
from dataclasses import dataclass

import numpy as np

from utils.constants import eV_to_nm
from .bandgap import bandgap_varshni
from .lineshape import gaussian

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Spectrum:
    """
    One simulated PL spectrum.

    Attributes:
        temperature: Sample temperature (K)
        Eg: Bandgap at that temperature (eV)
        energies: Photon energies (eV), ascending
        intensities: Emission intensity (a.u.), same length as energies
    """
    temperature: float
    Eg: float
    energies: np.ndarray
    intensities: np.ndarray

    def __post_init__(self):
        energies = np.array(self.energies, dtype=np.float64)
        intensities = np.array(self.intensities, dtype=np.float64)
        if energies.shape != intensities.shape or energies.ndim != 1:
            raise ValueError(
                f"energies and intensities must be 1-D and equal length "
                f"(got {energies.shape} and {intensities.shape})")
        energies.setflags(write=False)
        intensities.setflags(write=False)
        object.__setattr__(self, 'energies', energies)
        object.__setattr__(self, 'intensities', intensities)

    def __len__(self) -> int:
        return len(self.energies)

    def peak_index(self) -> int:
        """Index of the maximum intensity sample."""
        return int(np.argmax(self.intensities))

    def wavelengths_nm(self) -> np.ndarray:
        """Energy axis converted to wavelength (nm), descending."""
        return eV_to_nm(self.energies)

    def to_dict(self) -> dict:
        return {
            'temperature': self.temperature,
            'Eg': self.Eg,
            'energies': self.energies.tolist(),
            'intensities': self.intensities.tolist(),
        }


def energy_axis(center: float, half_width: float, n_points: int) -> np.ndarray:
    """N evenly spaced energies spanning [center - W, center + W] inclusive."""
    return np.linspace(center - half_width, center + half_width, n_points)


def generate_spectrum(T: float, material, config) -> Spectrum:
    """
    Generate the PL spectrum for one temperature.

    Args:
        T: Temperature in Kelvin
        material: MaterialParams
        config: SimulationConfig (line width, amplitude, window, resolution)

    Returns:
        Spectrum at T

    Raises:
        DomainError: Invalid configuration, or a Varshni pole at T when
            config.strict_bandgap is set
    """
    config.validate()

    E_g = bandgap_varshni(T, material,
                          strict=config.strict_bandgap,
                          eps=config.pole_epsilon)

    # Non-finite E_g (permissive pole) turns the whole spectrum into NaN
    with np.errstate(invalid='ignore', over='ignore'):
        energies = energy_axis(E_g, config.window_half_width, config.resolution)
        intensities = config.amplitude * gaussian(energies, E_g,
                                                  config.effective_fwhm())

    logger.debug("Spectrum at T=%.2f K: Eg=%.5f eV, %d points",
                 T, E_g, len(energies))
    return Spectrum(temperature=float(T), Eg=E_g,
                    energies=energies, intensities=intensities)
