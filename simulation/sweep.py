# =============================================================================
# simulation/sweep.py — Temperature Sweep
# =============================================================================
# Drives the Varshni bandgap and the PL line generator across a temperature
# range:
#
#   T_i = T_min + i·dT,   dT = (T_max - T_min) / (steps - 1),   i = 0..steps-1
#
# One Spectrum per temperature, in sweep order. The sweep is all-or-nothing:
# the first invalid point aborts it and no partial list is returned.
# =============================================================================

import logging
import time
from typing import List

from physics.pl_spectrum import Spectrum, generate_spectrum

logger = logging.getLogger(__name__)


def run_temperature_sweep(material, config) -> List[Spectrum]:
    """
    Simulate PL spectra across the configured temperature range.

    Args:
        material: MaterialParams
        config: SimulationConfig

    Returns:
        List of exactly config.steps spectra, ordered by sweep index.
        Temperatures increase when T_max > T_min, decrease when
        T_max < T_min and are constant when they are equal.

    Raises:
        DomainError: steps < 2, invalid line/window parameters, or a
            Varshni pole in strict mode
    """
    temperatures = config.validate().temperatures()

    logger.info("Temperature sweep: %s, T=%g-%g K, %d steps",
                material.name or 'custom material',
                config.T_min, config.T_max, config.steps)

    t0 = time.perf_counter()
    spectra = []
    for i, T in enumerate(temperatures):
        spectrum = generate_spectrum(float(T), material, config)
        logger.debug("  [%d/%d] T=%.3f K  Eg=%.5f eV",
                     i + 1, config.steps, spectrum.temperature, spectrum.Eg)
        spectra.append(spectrum)

    logger.info("Sweep finished: %d spectra x %d points in %.3f s",
                len(spectra), config.resolution, time.perf_counter() - t0)
    return spectra
