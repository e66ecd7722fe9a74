# physics/__init__.py
"""
Photoluminescence physics: Varshni bandgap and Gaussian emission lines.
"""

from .errors import DomainError
from .bandgap import bandgap_varshni, bandgap_curve
from .lineshape import gaussian, fwhm_to_sigma, combined_fwhm
from .pl_spectrum import Spectrum, generate_spectrum

__all__ = [
    'DomainError',
    'bandgap_varshni',
    'bandgap_curve',
    'gaussian',
    'fwhm_to_sigma',
    'combined_fwhm',
    'Spectrum',
    'generate_spectrum',
]
