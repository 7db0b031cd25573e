"""Composition of declared character sets into a coding system.

VR="PN" is the only place where all three decoders may be used; every other
text VR only uses the ideographic decoder (PS3.5 6.2). The positional rule
follows what pydicom does for multi-valued Specific Character Set:

* no value: the default repertoire everywhere,
* one value: used for every component,
* two values: the first for alphabetic, the second for ideographic and phonetic,
* three values: one per component, in declared order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence

from .config import OverflowPolicy, ResolverOptions
from .decoders import IDENTITY_DECODER, Decoder, resolve
from .errors import TooManyCharacterSetsError
from .names import lookup


logger = logging.getLogger(__name__)

MAX_DECLARED_CHARACTER_SETS = 3


class CodingSystemType(str, Enum):
    """Where a decoder is used within a person name value."""

    # Writing a name in (English) alphabets.
    ALPHABETIC = "alphabetic"
    # Writing the name in the native writing system, e.g. Kanji.
    IDEOGRAPHIC = "ideographic"
    # Hiragana and/or katakana.
    PHONETIC = "phonetic"


@dataclass(frozen=True)
class CodingSystem:
    alphabetic: Decoder
    ideographic: Decoder
    phonetic: Decoder

    @classmethod
    def default(cls) -> "CodingSystem":
        return cls(IDENTITY_DECODER, IDENTITY_DECODER, IDENTITY_DECODER)

    def for_type(self, kind: CodingSystemType) -> Decoder:
        if kind == CodingSystemType.ALPHABETIC:
            return self.alphabetic
        if kind == CodingSystemType.IDEOGRAPHIC:
            return self.ideographic
        return self.phonetic

    def for_vr(self, vr: str) -> Decoder:
        """Return the decoder for a whole value of the given VR.

        PN values start with the alphabetic component; callers splitting the
        ``=`` separated groups should use :meth:`for_type` per group.
        """

        if vr.strip().upper() == "PN":
            return self.alphabetic
        return self.ideographic


def assign(decoders: Sequence[Decoder]) -> CodingSystem:
    """Assign up to three decoders to the alphabetic/ideographic/phonetic roles."""

    count = len(decoders)
    if count > MAX_DECLARED_CHARACTER_SETS:
        raise ValueError(f"Expected at most {MAX_DECLARED_CHARACTER_SETS} decoders, got {count}")
    if count == 0:
        return CodingSystem.default()
    if count == 1:
        return CodingSystem(decoders[0], decoders[0], decoders[0])
    if count == 2:
        return CodingSystem(decoders[0], decoders[1], decoders[1])
    return CodingSystem(decoders[0], decoders[1], decoders[2])


def _normalize_names(names: Iterable[str], strip_padding: bool) -> List[str]:
    if strip_padding:
        return [name.strip(" ") for name in names]
    return list(names)


def parse_specific_character_set(
    names: Iterable[str],
    options: Optional[ResolverOptions] = None,
) -> CodingSystem:
    """Convert Specific Character Set values, e.g. ``["ISO_IR 100"]``, to a coding system.

    Every declared name is validated before any decoder is built, so an
    unknown name anywhere in the list raises ``UnknownCharacterSetError``.
    """

    if isinstance(names, str):
        # A single value, not an iterable of one-character names.
        names = [names]
    opts = options or ResolverOptions()
    declared = _normalize_names(names, opts.strip_padding)
    encodings = []
    for name in declared:
        logger.debug("Using coding system %s", name)
        encodings.append(lookup(name))

    if len(declared) > MAX_DECLARED_CHARACTER_SETS:
        if opts.overflow == OverflowPolicy.ERROR:
            raise TooManyCharacterSetsError(declared)
        logger.warning(
            "Specific Character Set declares %d values; ignoring %s",
            len(declared),
            declared[MAX_DECLARED_CHARACTER_SETS:],
        )
        declared = declared[:MAX_DECLARED_CHARACTER_SETS]
        encodings = encodings[:MAX_DECLARED_CHARACTER_SETS]

    decoders = [resolve(encoding, declared_name=name) for name, encoding in zip(declared, encodings)]
    return assign(decoders)
