"""Mapping of DICOM Specific Character Set defined terms to Python codecs."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .errors import UnknownCharacterSetError

# Sentinel for the default 7-bit repertoire; resolves to the identity decoder.
DEFAULT_ENCODING = ""

# ISO 2022 IR 58 is listed as ISO-2022-CN in PS3.18 Annex D, but that encoding
# is routinely unsupported and PS3.5 Annex K pairs ISO-IR 58 with GB2312.
# Whether the two defined terms name the same thing is unconfirmed; GB2312 keeps
# the attributes that follow SpecificCharacterSet readable.
ISO_2022_IR_58_ENCODING = "gb2312"

ENCODING_NAMES: Mapping[str, str] = MappingProxyType(
    {
        # An empty value (e.g. the first value of "\ISO 2022 IR 87") means default.
        "": DEFAULT_ENCODING,
        "ISO_IR 6": DEFAULT_ENCODING,
        "ISO 2022 IR 6": "latin_1",
        "ISO_IR 13": "shift_jis",
        "ISO 2022 IR 13": "shift_jis",
        "ISO_IR 100": "latin_1",
        "ISO 2022 IR 100": "latin_1",
        "ISO_IR 101": "iso8859_2",
        "ISO 2022 IR 101": "iso8859_2",
        "ISO_IR 109": "iso8859_3",
        "ISO 2022 IR 109": "iso8859_3",
        "ISO_IR 110": "iso8859_4",
        "ISO 2022 IR 110": "iso8859_4",
        "ISO_IR 126": "iso8859_7",  # Greek
        "ISO 2022 IR 126": "iso8859_7",
        "ISO_IR 127": "iso8859_6",  # Arabic
        "ISO 2022 IR 127": "iso8859_6",
        "ISO_IR 138": "iso8859_8",  # Hebrew
        "ISO 2022 IR 138": "iso8859_8",
        "ISO_IR 144": "iso8859_5",  # Cyrillic
        "ISO 2022 IR 144": "iso8859_5",
        "ISO_IR 148": "iso8859_9",  # Turkish
        "ISO 2022 IR 148": "iso8859_9",
        "ISO 2022 IR 149": "euc_kr",
        "ISO 2022 IR 159": "iso2022_jp_2",  # JIS X 0212 needs the ISO-2022-JP-2 superset
        "ISO_IR 166": "tis_620",  # Thai
        "ISO 2022 IR 166": "tis_620",
        "ISO 2022 IR 87": "iso2022_jp",
        "GB18030": "gb18030",
        "GBK": "gbk",
        "ISO_IR 192": "utf_8",
        "ISO 2022 IR 58": ISO_2022_IR_58_ENCODING,
    }
)


def lookup(name: str) -> str:
    """Return the encoding for a declared character set name."""

    try:
        return ENCODING_NAMES[name]
    except KeyError:
        raise UnknownCharacterSetError(name) from None


def is_supported(name: str) -> bool:
    return name in ENCODING_NAMES


def supported_names() -> tuple[str, ...]:
    return tuple(sorted(ENCODING_NAMES))
