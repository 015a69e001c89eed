#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/dataconv/result.py
"""Result envelope returned by every conversion operation.

A :class:`ConversionResult` is either a success carrying the complete output
text, or a failure carrying an error message. It is never both and never
neither, so callers can branch on ``result.success`` without any exception
handling.

Examples
--------
    >>> from dataconv import json_to_tabular
    >>> result = json_to_tabular('[{"a": 1}]')
    >>> result.success, result.data
    (True, 'a\\n1')
    >>> json_to_tabular("[]").error
    'Empty collection cannot be converted to tabular form'

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class ConversionResult:
    """Success/error envelope for a conversion.

    Parameters
    ----------
    success : bool
        Whether the conversion produced output
    data : str or None
        Output text in the target format (success only)
    error : str or None
        Error message locating the problem (failure only)

    Raises
    ------
    ValueError
        If the fields do not describe exactly one of success or failure

    """

    success: bool
    data: Optional[str] = None
    error: Optional[str] = None

    def __post_init__(self) -> None:
        """Enforce that exactly one of data and error is present."""
        if self.success:
            if self.data is None or self.error is not None:
                raise ValueError("A successful ConversionResult must carry data and no error")
        elif self.error is None or self.data is not None:
            raise ValueError("A failed ConversionResult must carry an error and no data")

    @classmethod
    def ok(cls, data: str) -> ConversionResult:
        """Build a successful result."""
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> ConversionResult:
        """Build a failed result.

        An empty message is replaced so the failure is never silent.
        """
        return cls(success=False, error=error or "Conversion failed")

    def unwrap(self) -> str:
        """Return the output text, raising ``ValueError`` with the error message on failure."""
        if not self.success:
            raise ValueError(self.error)
        return self.data  # type: ignore[return-value]

    def to_dict(self) -> dict[str, Any]:
        """Return the envelope as a plain dict with only the populated keys."""
        if self.success:
            return {"success": True, "data": self.data}
        return {"success": False, "error": self.error}
