from __future__ import annotations

import pytest
from pydantic import ValidationError

from charsets.config import OverflowPolicy, ResolverOptions


def test_defaults():
    options = ResolverOptions()
    assert options.overflow == OverflowPolicy.TRUNCATE
    assert options.strip_padding is True


def test_overflow_accepts_string_values():
    assert ResolverOptions(overflow="error").overflow == OverflowPolicy.ERROR


def test_invalid_overflow_rejected():
    with pytest.raises(ValidationError):
        ResolverOptions(overflow="ignore")


def test_options_are_immutable():
    options = ResolverOptions()
    with pytest.raises(ValidationError):
        options.strip_padding = False
