# simulation/session.py
"""
Sweep session: the result of one temperature sweep plus a cursor.

Front-ends that animate a sweep (slider over temperature, "current
spectrum" plot) keep their selection here instead of in module globals.
Each session owns its own state; nothing is shared between sessions.

Usage:
    from simulation.session import SweepSession

    session = SweepSession(material, config)
    session.run()
    session.select(10)
    spectrum = session.current
"""

import logging
from typing import List, Optional

from physics.pl_spectrum import Spectrum
from .sweep import run_temperature_sweep

logger = logging.getLogger(__name__)


class SweepSession:
    """Holds a sweep result and the currently selected spectrum index."""

    def __init__(self, material, config, label: str = ''):
        """
        Args:
            material: MaterialParams
            config: SimulationConfig
            label: Optional descriptive label
        """
        self.material = material
        self.config = config
        self.label = label
        self.spectra: List[Spectrum] = []
        self.current_index = 0

    def run(self) -> List[Spectrum]:
        """
        (Re)run the sweep and reset the cursor to the first spectrum.

        On failure the previous result is kept unchanged.
        """
        spectra = run_temperature_sweep(self.material, self.config)
        self.spectra = spectra
        self.current_index = 0
        logger.info("Session %s: %d spectra ready", self.label or '(unnamed)',
                    len(spectra))
        return spectra

    @property
    def has_results(self) -> bool:
        return bool(self.spectra)

    def __len__(self) -> int:
        return len(self.spectra)

    def select(self, index: int) -> Spectrum:
        """
        Move the cursor to index (negative indices count from the end).

        Raises:
            IndexError: If index is outside the sweep
        """
        n = len(self.spectra)
        if not -n <= index < n:
            raise IndexError(f"Spectrum index {index} out of range (0..{n - 1})")
        self.current_index = index % n
        return self.spectra[self.current_index]

    def step(self, delta: int = 1) -> Spectrum:
        """Move the cursor by delta, clamped to the ends of the sweep."""
        if not self.spectra:
            raise IndexError("No spectra: run the session first")
        index = min(max(self.current_index + delta, 0), len(self.spectra) - 1)
        return self.select(index)

    @property
    def current(self) -> Optional[Spectrum]:
        """Selected spectrum, or None before the first run."""
        if not self.spectra:
            return None
        return self.spectra[self.current_index]

    def nearest(self, temperature: float) -> Spectrum:
        """Select and return the spectrum closest to the given temperature."""
        if not self.spectra:
            raise IndexError("No spectra: run the session first")
        index = min(range(len(self.spectra)),
                    key=lambda i: abs(self.spectra[i].temperature - temperature))
        return self.select(index)

    def summary(self) -> dict:
        """Summary dict of the session (for display / logging)."""
        return {
            'label': self.label,
            'material': str(self.material),
            'config': str(self.config),
            'n_spectra': len(self.spectra),
            'current_index': self.current_index,
            'current_T_K': self.current.temperature if self.current is not None else None,
        }
