# =============================================================================
# physics/lineshape.py — Emission Line Shapes
# =============================================================================
# Peak-normalised Gaussian in energy space:
#
#   g(E) = exp( -0.5·((E - E_c)/σ)² ),   σ = FWHM / (2·sqrt(2·ln 2))
#
# g(E_c) = 1 and g(E_c ± FWHM/2) = 1/2.
#
# References:
#   - Schubert, "Light-Emitting Diodes", 2nd Ed., Ch. 5
# =============================================================================

import numpy as np

from .errors import DomainError

# σ = FWHM · FWHM_TO_SIGMA
FWHM_TO_SIGMA = 1.0 / (2.0 * np.sqrt(2.0 * np.log(2.0)))


def fwhm_to_sigma(fwhm: float) -> float:
    """
    Standard deviation of a Gaussian with the given FWHM.

    Raises:
        DomainError: If fwhm is not strictly positive
    """
    if not fwhm > 0:
        raise DomainError('peak_fwhm', f"peak_fwhm must be positive (got {fwhm!r})")
    return fwhm * FWHM_TO_SIGMA


def gaussian(x, center: float, fwhm: float):
    """
    Peak-normalised Gaussian line (value 1.0 at x = center).

    Args:
        x: Energy or energy array (eV)
        center: Line centre (eV)
        fwhm: Full width at half maximum (eV), > 0

    Returns:
        Line shape evaluated at x
    """
    sigma = fwhm_to_sigma(fwhm)
    return np.exp(-0.5 * ((np.asarray(x, dtype=np.float64) - center) / sigma) ** 2)


def combined_fwhm(*widths: float) -> float:
    """
    FWHM of Gaussians convolved together: sqrt(Σ FWHM_i²).

    Used to fold the spectrometer resolution into the intrinsic
    linewidth.
    """
    return float(np.sqrt(sum(w * w for w in widths)))
