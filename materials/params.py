# materials/params.py
"""
Varshni material parameters.

A MaterialParams value is the only material description the simulator
needs: the 0 K bandgap and the two Varshni coefficients.

Usage:
    from materials import MaterialParams, get_material

    mat = MaterialParams(Eg0=2.3, alpha=5e-4, beta=200.0)
    gaas = get_material('GaAs')
"""

from dataclasses import dataclass, asdict

from .reference_data import MATERIALS


@dataclass(frozen=True)
class MaterialParams:
    """
    Varshni parameters of one semiconductor.

    Attributes:
        Eg0: Bandgap at T = 0 K (eV)
        alpha: Varshni coefficient (eV/K)
        beta: Varshni characteristic temperature (K)
        name: Optional label, ignored by the physics
    """
    Eg0: float
    alpha: float
    beta: float
    name: str = ''

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_reference(cls, key: str) -> 'MaterialParams':
        """Build from an entry of materials/reference_data.py."""
        mat = MATERIALS[key]
        return cls(
            Eg0=mat['E_g_0K_eV'],
            alpha=mat['varshni_alpha_eV_per_K'],
            beta=mat['varshni_beta_K'],
            name=mat['name'],
        )

    def __str__(self) -> str:
        label = self.name or 'Custom'
        return (f"MaterialParams({label}: Eg0={self.Eg0:.4g} eV, "
                f"alpha={self.alpha:.4g} eV/K, beta={self.beta:.4g} K)")


# =============================================================================
# MATERIAL LIBRARY
# =============================================================================

GAAS = MaterialParams.from_reference('GaAs')
SILICON = MaterialParams.from_reference('Si')
GAN = MaterialParams.from_reference('GaN')
INGAN_BLUE = MaterialParams.from_reference('InGaN_Blue')
ALINGAP_RED = MaterialParams.from_reference('AlInGaP_Red')
PEROVSKITE_DEMO = MaterialParams.from_reference('Perovskite_Demo')

MATERIALS_DATABASE = {
    'GaAs': GAAS,
    'Gallium Arsenide': GAAS,
    'Si': SILICON,
    'Silicon': SILICON,
    'GaN': GAN,
    'Gallium Nitride': GAN,
    'InGaN': INGAN_BLUE,
    'InGaN_Blue': INGAN_BLUE,
    'AlInGaP': ALINGAP_RED,
    'AlInGaP_Red': ALINGAP_RED,
    'Perovskite': PEROVSKITE_DEMO,
    'Perovskite_Demo': PEROVSKITE_DEMO,
}


def get_material(name: str) -> MaterialParams:
    """
    Get material parameters by name.

    Args:
        name: Material name (e.g. 'GaAs', 'Si', 'Perovskite')

    Returns:
        MaterialParams instance

    Raises:
        KeyError: If material not found
    """
    if name not in MATERIALS_DATABASE:
        available = list(MATERIALS_DATABASE.keys())
        raise KeyError(f"Material '{name}' not found. Available: {available}")
    return MATERIALS_DATABASE[name]


def list_materials() -> list:
    """Return the canonical material keys (one per material)."""
    return list(MATERIALS.keys())
