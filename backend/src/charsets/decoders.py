"""Decoders that turn DICOM text bytes into ``str``."""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from .errors import ResolverInconsistencyError
from .names import DEFAULT_ENCODING


@dataclass(frozen=True)
class Decoder:
    """Stateless bytes-to-text conversion bound to a single encoding.

    ``encoding`` is the codec's canonical name, so aliases such as ``latin-1``
    and ``latin_1`` compare equal once resolved. It is ``None`` for the identity
    decoder used by the default 7-bit repertoire, which maps every byte to the
    code point of the same value.
    """

    encoding: Optional[str]

    @property
    def is_identity(self) -> bool:
        return self.encoding is None

    def decode(self, data: bytes, errors: str = "strict") -> str:
        if self.encoding is None:
            return data.decode("latin_1")
        return codecs.decode(data, self.encoding, errors)


IDENTITY_DECODER = Decoder(encoding=None)


@lru_cache(maxsize=None)
def _decoder_for(encoding: str) -> Decoder:
    # LookupError propagates and is not cached.
    return Decoder(encoding=codecs.lookup(encoding).name)


def resolve(encoding: str, *, declared_name: Optional[str] = None) -> Decoder:
    """Return a decoder for a canonical encoding.

    ``declared_name`` is only used to give errors some context.
    """

    if encoding == DEFAULT_ENCODING:
        return IDENTITY_DECODER
    try:
        return _decoder_for(encoding)
    except LookupError as exc:
        raise ResolverInconsistencyError(declared_name, encoding) from exc
