# =============================================================================
# REFERENCE DATA: Varshni Parameters for Luminescent Semiconductors
# =============================================================================
# Sources:
#   - Ioffe Institute NSM Archive (www.ioffe.ru/SVA/NSM/Semicond/)
#   - Varshni, Physica 34, 149 (1967)
#   - Vurgaftman et al., J. Appl. Phys. 89, 5815 (2001)
#
# Every entry carries the three Varshni parameters
#     E_g(T) = E_g(0) - alpha*T^2 / (T + beta)
# plus the tabulated room-temperature gap used to cross-check them.
# =============================================================================

MATERIALS = {}

# ---- GALLIUM ARSENIDE (GaAs) ----
# Source: Ioffe - "Eg=1.519-5.405e-4*T^2/(T+204)"
MATERIALS['GaAs'] = {
    'name': 'Gallium Arsenide',
    'bandgap_type': 'direct',
    'E_g_0K_eV': 1.519,
    'E_g_300K_eV': 1.424,
    'varshni_alpha_eV_per_K': 5.405e-4,
    'varshni_beta_K': 204.0,
}

# ---- SILICON (Si) ----
# Source: Ioffe - "Eg=1.17-4.73e-4*T^2/(T+636)"
MATERIALS['Si'] = {
    'name': 'Silicon',
    'bandgap_type': 'indirect',
    'E_g_0K_eV': 1.17,
    'E_g_300K_eV': 1.12,
    'varshni_alpha_eV_per_K': 4.73e-4,
    'varshni_beta_K': 636.0,
}

# ---- GALLIUM NITRIDE (GaN, wurtzite) ----
# Source: Vurgaftman 2001
MATERIALS['GaN'] = {
    'name': 'Gallium Nitride',
    'bandgap_type': 'direct',
    'E_g_0K_eV': 3.507,
    'E_g_300K_eV': 3.44,
    'varshni_alpha_eV_per_K': 9.09e-4,
    'varshni_beta_K': 830.0,
}

# ---- InGaN (~20% In, blue emitter) ----
# Vegard interpolation with bowing 1.4 eV, approximate Varshni coefficients
MATERIALS['InGaN_Blue'] = {
    'name': 'Indium Gallium Nitride (blue)',
    'bandgap_type': 'direct',
    'E_g_0K_eV': 2.90,
    'E_g_300K_eV': 2.835,
    'varshni_alpha_eV_per_K': 7.0e-4,
    'varshni_beta_K': 600.0,
}

# ---- AlInGaP (red emitter) ----
# Source: Literature, composition dependent
MATERIALS['AlInGaP_Red'] = {
    'name': 'Aluminium Indium Gallium Phosphide (red)',
    'bandgap_type': 'direct',
    'E_g_0K_eV': 2.10,
    'E_g_300K_eV': 2.01,
    'varshni_alpha_eV_per_K': 4.5e-4,
    'varshni_beta_K': 200.0,
}

# ---- Demo perovskite ----
# Parameters of the web demo's default simulation (not a fitted material)
MATERIALS['Perovskite_Demo'] = {
    'name': 'Perovskite (demo parameters)',
    'bandgap_type': 'direct',
    'E_g_0K_eV': 2.3,
    'E_g_300K_eV': 2.21,
    'varshni_alpha_eV_per_K': 5.0e-4,
    'varshni_beta_K': 200.0,
}


def validate_reference_data() -> bool:
    """
    Cross-check the Varshni parameters against the tabulated 300K gaps.

    Returns True if every material reproduces E_g(300K) within 15 meV.
    """
    T = 300.0
    ok = True
    for key, mat in MATERIALS.items():
        E_g_calc = mat['E_g_0K_eV'] - (
            mat['varshni_alpha_eV_per_K'] * T**2 / (T + mat['varshni_beta_K'])
        )
        if abs(E_g_calc - mat['E_g_300K_eV']) > 0.015:
            print(f"  {key}: Varshni gives {E_g_calc:.4f} eV, "
                  f"table says {mat['E_g_300K_eV']:.4f} eV")
            ok = False
    return ok


if __name__ == "__main__":
    print("Varshni reference data")
    print("=" * 50)
    for key, mat in MATERIALS.items():
        print(f"  {key:16s} Eg0={mat['E_g_0K_eV']:.3f} eV  "
              f"alpha={mat['varshni_alpha_eV_per_K']:.3e} eV/K  "
              f"beta={mat['varshni_beta_K']:.0f} K")
    print(f"\nConsistency check: {'PASS' if validate_reference_data() else 'FAIL'}")
