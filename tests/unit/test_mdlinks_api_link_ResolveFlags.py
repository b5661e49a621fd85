"""Unit tests for ResolveFlags."""

import pytest

from mdlinks.api.link.LinkResolver import LinkResolver
from mdlinks.api.link.ResolveFlags import (
    LOOSE_MATCH,
    NONE,
    ONLY_LOCAL,
    ONLY_REMOTE,
    ONLY_URI,
    PREFER_LOCAL,
    ResolveFlags,
)

pytestmark = pytest.mark.link


def test_or_combines():
    flags = ONLY_URI | LOOSE_MATCH
    assert flags.only_uri and flags.loose_match
    assert not flags.only_local
    assert flags.names == ["ONLY_URI", "LOOSE_MATCH"]
    assert LOOSE_MATCH in flags
    assert ONLY_LOCAL not in flags


def test_only_local_and_only_remote_rejected():
    with pytest.raises(ValueError, match="cannot be combined"):
        ONLY_LOCAL | ONLY_REMOTE
    with pytest.raises(ValueError):
        ResolveFlags(only_local=True, only_remote=True)


def test_from_names():
    assert ResolveFlags.from_names(["only_uri", "LOOSE_MATCH"]) == ONLY_URI | LOOSE_MATCH
    assert ResolveFlags.from_names([]) == NONE
    with pytest.raises(ValueError, match="Unknown resolve flag"):
        ResolveFlags.from_names(["EVERYTHING"])


def test_rendering_axes():
    assert NONE.wants_local_forms and not NONE.wants_remote_forms
    assert not ONLY_REMOTE.wants_local_forms and ONLY_REMOTE.wants_remote_forms
    assert not ONLY_REMOTE.remote_as_url
    assert (ONLY_REMOTE | ONLY_URI).remote_as_url
    assert PREFER_LOCAL.wants_local_forms and PREFER_LOCAL.wants_remote_forms and PREFER_LOCAL.remote_as_url
    assert (ONLY_REMOTE | PREFER_LOCAL).wants_local_forms
    assert not ONLY_LOCAL.wants_remote_forms


def test_constants_on_resolver_class():
    assert LinkResolver.ONLY_URI is ONLY_URI
    assert LinkResolver.NONE is NONE
    assert repr(NONE) == "NONE"
    assert repr(PREFER_LOCAL | LOOSE_MATCH) == "PREFER_LOCAL | LOOSE_MATCH"
