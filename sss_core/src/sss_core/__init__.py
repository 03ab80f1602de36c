"""Threshold secret reconstruction with exact Lagrange interpolation."""
from .errors import (
    CaseFormatError,
    DivisionByZero,
    DuplicateXCoordinate,
    InsufficientShares,
    InvalidBase,
    InvalidDigit,
    InvalidThreshold,
    NonIntegralResult,
    ShareRecoveryError,
)
from .lagrange import interpolate_at_zero
from .models import ConsistencyReport, Share, ShareCase, ShareRecord
from .radix import decode, encode
from .rational import ExactRational
from .service import decode_shares, reconstruct, verify_subsets
from .version import __version__

__all__ = [
    "CaseFormatError",
    "ConsistencyReport",
    "DivisionByZero",
    "DuplicateXCoordinate",
    "ExactRational",
    "InsufficientShares",
    "InvalidBase",
    "InvalidDigit",
    "InvalidThreshold",
    "NonIntegralResult",
    "Share",
    "ShareCase",
    "ShareRecord",
    "ShareRecoveryError",
    "decode",
    "decode_shares",
    "encode",
    "interpolate_at_zero",
    "reconstruct",
    "verify_subsets",
    "__version__",
]
