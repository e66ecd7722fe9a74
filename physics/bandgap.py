# =============================================================================
# physics/bandgap.py — Temperature-Dependent Bandgap (Varshni)
# =============================================================================
# E_g(T) = E_g(0) - α·T² / (T + β)
#
# Evaluated in IEEE-754 double precision. The relation has a pole at
# T = -β; by default the pole is not guarded and ±inf / nan propagate into
# the result (permissive mode). Strict mode raises DomainError instead.
#
# References:
#   - Varshni, Physica 34, 149 (1967)
#   - Sze & Ng, "Physics of Semiconductor Devices", 3rd Ed., Ch. 1
# =============================================================================

import logging

import numpy as np

from .errors import DomainError

logger = logging.getLogger(__name__)

# Tolerance on |T + β| below which the denominator counts as zero
DEFAULT_POLE_EPSILON = 1e-9


def bandgap_varshni(T, material, strict: bool = False,
                    eps: float = DEFAULT_POLE_EPSILON):
    """
    Bandgap energy at temperature T using the Varshni equation.

    E_g(T) = E_g0 - α·T² / (T + β)

    No clamping is applied: pathological parameters may give a negative
    gap or one above E_g0.

    Args:
        T: Temperature in Kelvin (float or array)
        material: MaterialParams (Eg0, alpha, beta)
        strict: Raise DomainError when |T + β| <= eps or is NaN
        eps: Pole tolerance used by both modes

    Returns:
        E_g in eV (float for scalar T, ndarray otherwise)

    Raises:
        DomainError: strict mode only, on a (near-)zero denominator
    """
    T_arr = np.asarray(T, dtype=np.float64)
    denom = T_arr + material.beta

    with np.errstate(invalid='ignore'):
        at_pole = np.abs(denom) <= eps
    is_nan = np.isnan(denom)

    if np.any(at_pole):
        T_bad = float(np.ravel(T_arr[at_pole] if T_arr.ndim else T_arr)[0])
        if strict:
            raise DomainError(
                'beta',
                f"T + beta is within {eps:g} of zero at T={T_bad:g} K "
                f"(beta={material.beta:g} K)")
        logger.warning("Varshni denominator T + beta ~ 0 at T=%g K "
                       "(beta=%g K); result is not finite", T_bad, material.beta)
    if strict and np.any(is_nan):
        raise DomainError('beta', "T + beta is NaN; check temperature and beta")

    with np.errstate(divide='ignore', invalid='ignore'):
        E_g = material.Eg0 - material.alpha * T_arr**2 / denom

    if E_g.ndim == 0:
        return float(E_g)
    return E_g


def bandgap_curve(temperatures, material, strict: bool = False,
                  eps: float = DEFAULT_POLE_EPSILON) -> np.ndarray:
    """
    Vectorised E_g(T) over an array of temperatures.

    Returns:
        1-D float64 array, same length as temperatures
    """
    T = np.atleast_1d(np.asarray(temperatures, dtype=np.float64))
    return bandgap_varshni(T, material, strict=strict, eps=eps)


def bandgap_shift(material, T_from: float, T_to: float) -> float:
    """E_g(T_to) - E_g(T_from) in eV (negative for normal red-shift)."""
    return bandgap_varshni(T_to, material) - bandgap_varshni(T_from, material)
