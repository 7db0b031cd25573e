"""Exceptions raised while resolving Specific Character Set values."""

from __future__ import annotations

from typing import Sequence


class CharacterSetError(ValueError):
    """Base class for character set resolution failures."""


class UnknownCharacterSetError(CharacterSetError):
    """Raised when a declared character set has no known encoding."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown character set '{name}'")


class ResolverInconsistencyError(CharacterSetError):
    """Raised when a supported character set maps to an encoding Python cannot load."""

    def __init__(self, name: str | None, encoding: str) -> None:
        self.name = name
        self.encoding = encoding
        if name is None:
            message = f"No decoder available for encoding '{encoding}'"
        else:
            message = f"No decoder available for encoding '{encoding}' (declared as '{name}')"
        super().__init__(message)


class TooManyCharacterSetsError(CharacterSetError):
    """Raised when more than three character sets are declared and overflow is an error."""

    def __init__(self, names: Sequence[str]) -> None:
        self.names = tuple(names)
        super().__init__(
            f"At most 3 character sets may be declared, got {len(self.names)}: {list(self.names)}"
        )
