"""Tests for the tagged probe line codec."""

import pytest

from gitprompt.status.models.probe_results import (
    ActionResult,
    AheadBehindResult,
    DiffResult,
    ProbeKind,
    RemoteResult,
    StashResult,
    StatusScanResult,
    UnknownProbeResult,
    decode_probe_line,
    empty_result,
    encode_probe_line,
)


def test_encode_uses_tag_and_payload() -> None:
    assert encode_probe_line(AheadBehindResult(ahead=3, behind=1)) == "A:3 1"
    assert encode_probe_line(RemoteResult(ref="refs/remotes/origin/main")) == (
        "R:refs/remotes/origin/main"
    )
    assert encode_probe_line(ActionResult(action="")) == "s:"


def test_decode_keeps_delimiters_inside_payload() -> None:
    result = decode_probe_line("R:refs/remotes/origin/fix:colon\n")

    assert result == RemoteResult(ref="refs/remotes/origin/fix:colon")


def test_decode_diff_tags_map_to_kinds() -> None:
    assert decode_probe_line("I:1") == DiffResult(kind=ProbeKind.INDEX_DIFF, exit_code=1)
    assert decode_probe_line("i:0") == DiffResult(kind=ProbeKind.WORKTREE_DIFF, exit_code=0)


def test_decode_empty_payloads_mean_nothing_found() -> None:
    assert decode_probe_line("S:") == StashResult(count=0)
    assert decode_probe_line("A:") == AheadBehindResult(ahead=0, behind=0)


def test_decode_status_scan_entries() -> None:
    result = decode_probe_line("v:?? a.txt\0M  b.txt")

    assert result == StatusScanResult(entries=("?? a.txt", "M  b.txt"))


def test_decode_blank_line_is_none() -> None:
    assert decode_probe_line("") is None
    assert decode_probe_line("\n") is None


@pytest.mark.parametrize(
    "line",
    [
        "x:whatever",
        "S:lots",
        "S:--1",
        "i:\u00b2",
        "A:1",
        "A:1 \u00b2",
        "A:one two",
        "I:yes",
        "no delimiter",
    ],
)
def test_decode_unknown_or_unparsable_is_unknown(line: str) -> None:
    assert isinstance(decode_probe_line(line), UnknownProbeResult)


@pytest.mark.parametrize("kind", list(ProbeKind))
def test_empty_result_matches_kind(kind: ProbeKind) -> None:
    result = empty_result(kind)

    assert result.kind is kind
    assert decode_probe_line(encode_probe_line(result)) == result
