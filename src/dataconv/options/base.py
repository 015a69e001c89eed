"""Base classes for parser and renderer options.

Options are frozen dataclasses. Each field carries a ``metadata["help"]``
description of what it controls.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def field_names(cls) -> list[str]:
        """Return the names of all option fields in declaration order."""
        return [f.name for f in fields(cls)]  # type: ignore[arg-type]

    @classmethod
    def from_mapping(cls, values: dict[str, Any]) -> Self:
        """Build options from a plain mapping such as a config file section.

        Raises
        ------
        ValueError
            If ``values`` contains a key that is not an option field, or if
            a value fails the class's own validation

        """
        known = set(cls.field_names())
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(
                f"Unknown option(s) for {cls.__name__}: {', '.join(unknown)}. "
                f"Valid options: {', '.join(sorted(known))}"
            )
        return cls(**values)


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Parsers convert source text into a canonical value tree.

    Notes
    -----
    Subclasses define format-specific fields as frozen dataclass fields and
    validate them in ``__post_init__``.

    """

    def __post_init__(self) -> None:
        """Validate field values. The base class has none."""
        pass


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Renderers convert a canonical value tree into target text.

    """

    def __post_init__(self) -> None:
        """Validate field values. The base class has none."""
        pass
