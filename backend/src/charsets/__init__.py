"""Specific Character Set resolution for DICOM text values."""

from .coding_system import CodingSystem, CodingSystemType, assign, parse_specific_character_set
from .config import OverflowPolicy, ResolverOptions
from .dataset import coding_system_for_dataset, declared_character_sets
from .decoders import IDENTITY_DECODER, Decoder, resolve
from .errors import (
    CharacterSetError,
    ResolverInconsistencyError,
    TooManyCharacterSetsError,
    UnknownCharacterSetError,
)
from .names import DEFAULT_ENCODING, ENCODING_NAMES, lookup

__all__ = [
    "CharacterSetError",
    "CodingSystem",
    "CodingSystemType",
    "DEFAULT_ENCODING",
    "Decoder",
    "ENCODING_NAMES",
    "IDENTITY_DECODER",
    "OverflowPolicy",
    "ResolverInconsistencyError",
    "ResolverOptions",
    "TooManyCharacterSetsError",
    "UnknownCharacterSetError",
    "assign",
    "coding_system_for_dataset",
    "declared_character_sets",
    "lookup",
    "parse_specific_character_set",
    "resolve",
]
