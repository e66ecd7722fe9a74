# simulation/config.py
"""
SimulationConfig - Temperature-sweep configuration dataclass.

Holds everything a PL temperature sweep needs besides the material:
temperature range, line shape, energy window and sampling resolution.

Usage:
    from simulation.config import SimulationConfig

    cfg = SimulationConfig()                      # defaults
    cfg = SimulationConfig.from_preset('narrow')  # load preset
    cfg = dataclasses.replace(cfg, steps=10)      # override a field
    cfg.validate()
"""

import json
from dataclasses import dataclass, asdict, fields
from pathlib import Path

import numpy as np

from physics.bandgap import DEFAULT_POLE_EPSILON
from physics.errors import DomainError
from physics.lineshape import combined_fwhm


PRESETS_DIR = Path(__file__).parent / 'presets'


def _is_integer(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


@dataclass(frozen=True)
class SimulationConfig:
    """Complete configuration for one temperature sweep."""

    # -- Temperature range -----------------------------------------------------
    T_min: float = 100.0
    T_max: float = 400.0
    steps: int = 50

    # -- Emission line ---------------------------------------------------------
    peak_fwhm: float = 0.05            # eV
    amplitude: float = 1.0             # a.u. (peak height)
    instrument_resolution: float = 0.0  # eV, added in quadrature to peak_fwhm

    # -- Energy axis -----------------------------------------------------------
    window_half_width: float = 0.5     # eV, axis spans Eg ± this
    resolution: int = 400              # samples per spectrum

    # -- Varshni pole handling -------------------------------------------------
    strict_bandgap: bool = False
    pole_epsilon: float = DEFAULT_POLE_EPSILON

    # -- Metadata --------------------------------------------------------------
    preset_name: str = ''
    description: str = ''

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def validate(self) -> 'SimulationConfig':
        """
        Check every numeric field, raising on the first bad one.

        Returns:
            self, so calls can be chained

        Raises:
            DomainError: naming the offending field
        """
        if not _is_integer(self.steps):
            raise DomainError('steps', f"steps must be an integer (got {self.steps!r})")
        if self.steps < 2:
            raise DomainError('steps', f"steps must be at least 2 (got {self.steps})")
        if not self.peak_fwhm > 0:
            raise DomainError('peak_fwhm',
                              f"peak_fwhm must be positive (got {self.peak_fwhm!r})")
        if not self.instrument_resolution >= 0:
            raise DomainError('instrument_resolution',
                              "instrument_resolution must be zero or positive "
                              f"(got {self.instrument_resolution!r})")
        if not self.window_half_width > 0:
            raise DomainError('window_half_width',
                              "window_half_width must be positive "
                              f"(got {self.window_half_width!r})")
        if not _is_integer(self.resolution) or self.resolution < 2:
            raise DomainError('resolution',
                              f"resolution must be an integer >= 2 (got {self.resolution!r})")
        if not self.pole_epsilon >= 0:
            raise DomainError('pole_epsilon',
                              f"pole_epsilon must be zero or positive (got {self.pole_epsilon!r})")
        return self

    # -------------------------------------------------------------------------
    # Derived quantities
    # -------------------------------------------------------------------------

    def effective_fwhm(self) -> float:
        """Line width after instrument broadening (eV)."""
        if not self.instrument_resolution:
            return float(self.peak_fwhm)
        return combined_fwhm(self.peak_fwhm, self.instrument_resolution)

    def temperature_step(self) -> float:
        """dT = (T_max - T_min) / (steps - 1)."""
        self.validate()
        return (self.T_max - self.T_min) / (self.steps - 1)

    def temperatures(self) -> np.ndarray:
        """Sweep grid T_i = T_min + i·dT, endpoints exact."""
        self.validate()
        return np.linspace(self.T_min, self.T_max, self.steps)

    def energy_step(self) -> float:
        """Spacing of the energy axis (eV)."""
        self.validate()
        return 2.0 * self.window_half_width / (self.resolution - 1)

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict:
        """Convert to plain dict."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> 'SimulationConfig':
        """Build from a dict, ignoring unknown keys so old files still load."""
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in data.items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def load(cls, path) -> 'SimulationConfig':
        """Load configuration from JSON file."""
        path = Path(path)
        data = json.loads(path.read_text(encoding='utf-8'))
        return cls.from_dict(data)

    @classmethod
    def from_preset(cls, name: str) -> 'SimulationConfig':
        """
        Load a named preset from the presets/ directory.

        Args:
            name: Preset name (without .json extension)

        Returns:
            SimulationConfig with preset values
        """
        path = PRESETS_DIR / f'{name}.json'
        if not path.exists():
            available = cls.list_presets()
            raise FileNotFoundError(
                f"Preset '{name}' not found. Available: {available}")
        return cls.load(path)

    @classmethod
    def list_presets(cls) -> list:
        """List available preset names."""
        if not PRESETS_DIR.exists():
            return []
        return sorted(p.stem for p in PRESETS_DIR.glob('*.json'))

    def __str__(self) -> str:
        name = self.preset_name or 'Custom'
        return (f"SimulationConfig({name}: "
                f"T={self.T_min:g}-{self.T_max:g}K x {self.steps}, "
                f"FWHM={self.peak_fwhm * 1e3:.1f}meV, "
                f"window=±{self.window_half_width:g}eV/{self.resolution}pts)")
