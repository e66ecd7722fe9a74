# physics/errors.py
"""
Error types raised by the physics layer.
"""


class DomainError(ValueError):
    """
    Invalid physical or numeric configuration.

    Raised before any computation proceeds, so a caller never receives a
    partial spectrum or a partial sweep.

    Attributes:
        field: Name of the offending parameter (e.g. 'steps', 'peak_fwhm')
    """

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
