"""Typed probe results and their single-line wire encoding.

Every probe produces exactly one result object. Results travel from the
runner to the demultiplexer as typed values; the `<tag>:<payload>` line form
exists for debugging (`gitprompt probes`) and for feeding recorded probe
output back through the demultiplexer.
"""

from dataclasses import dataclass
from enum import Enum

TAG_DELIMITER = ":"


class ProbeKind(Enum):
    """Probe identities. The value is the probe's protocol tag."""

    ACTION = "s"
    STASH = "S"
    REMOTE = "R"
    AHEAD_BEHIND = "A"
    COMMIT = "c"
    POSITION = "p"
    INDEX_DIFF = "I"
    WORKTREE_DIFF = "i"
    STATUS_SCAN = "v"

    @property
    def tag(self) -> str:
        return self.value


@dataclass(frozen=True)
class ActionResult:
    """In-progress action name ("" when none)."""

    action: str
    kind = ProbeKind.ACTION

    def payload(self) -> str:
        return self.action


@dataclass(frozen=True)
class StashResult:
    count: int
    kind = ProbeKind.STASH

    def payload(self) -> str:
        return str(self.count)


@dataclass(frozen=True)
class RemoteResult:
    """Fully-qualified upstream ref ("" when there is no upstream)."""

    ref: str
    kind = ProbeKind.REMOTE

    def payload(self) -> str:
        return self.ref


@dataclass(frozen=True)
class AheadBehindResult:
    ahead: int
    behind: int
    kind = ProbeKind.AHEAD_BEHIND

    def payload(self) -> str:
        return f"{self.ahead} {self.behind}"


@dataclass(frozen=True)
class CommitResult:
    sha: str
    kind = ProbeKind.COMMIT

    def payload(self) -> str:
        return self.sha


@dataclass(frozen=True)
class PositionResult:
    label: str
    kind = ProbeKind.POSITION

    def payload(self) -> str:
        return self.label


@dataclass(frozen=True)
class DiffResult:
    """Exit code of a quiet diff; non-zero means differences are present.

    `kind` is either INDEX_DIFF (index vs HEAD) or WORKTREE_DIFF (working
    tree vs index).
    """

    kind: ProbeKind
    exit_code: int

    @property
    def differs(self) -> bool:
        return self.exit_code != 0

    def payload(self) -> str:
        return str(self.exit_code)


@dataclass(frozen=True)
class StatusScanResult:
    """Porcelain status entries from the verbose scan."""

    entries: tuple[str, ...]
    kind = ProbeKind.STATUS_SCAN

    def payload(self) -> str:
        return "\0".join(self.entries)


@dataclass(frozen=True)
class UnknownProbeResult:
    """A line whose tag is unrecognised or whose payload does not parse.

    Applying it is a no-op.
    """

    tag: str
    payload_text: str

    def payload(self) -> str:
        return self.payload_text


ProbeResult = (
    ActionResult
    | StashResult
    | RemoteResult
    | AheadBehindResult
    | CommitResult
    | PositionResult
    | DiffResult
    | StatusScanResult
    | UnknownProbeResult
)


def empty_result(kind: ProbeKind) -> ProbeResult:
    """Return the result a failed probe reports.

    Failed probes still report, so the coordinator can tell "ran and found
    nothing" from "never planned".
    """
    if kind is ProbeKind.ACTION:
        return ActionResult(action="")
    if kind is ProbeKind.STASH:
        return StashResult(count=0)
    if kind is ProbeKind.REMOTE:
        return RemoteResult(ref="")
    if kind is ProbeKind.AHEAD_BEHIND:
        return AheadBehindResult(ahead=0, behind=0)
    if kind is ProbeKind.COMMIT:
        return CommitResult(sha="")
    if kind is ProbeKind.POSITION:
        return PositionResult(label="")
    if kind in (ProbeKind.INDEX_DIFF, ProbeKind.WORKTREE_DIFF):
        return DiffResult(kind=kind, exit_code=0)
    return StatusScanResult(entries=())


def encode_probe_line(result: ProbeResult) -> str:
    """Encode a result as a `<tag>:<payload>` line (without trailing newline)."""
    if isinstance(result, UnknownProbeResult):
        tag = result.tag
    else:
        tag = result.kind.tag
    return f"{tag}{TAG_DELIMITER}{result.payload()}"


def _parse_int(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


def decode_probe_line(line: str) -> ProbeResult | None:
    """Decode one tagged line into a typed result.

    Args:
        line: A line of probe output, with or without trailing newline

    Returns:
        The decoded result, UnknownProbeResult for unrecognised tags or
        unparsable payloads, or None for blank lines
    """
    text = line.rstrip("\r\n")
    if not text:
        return None

    tag, sep, payload = text.partition(TAG_DELIMITER)
    if not sep:
        return UnknownProbeResult(tag="", payload_text=text)

    if tag == ProbeKind.ACTION.tag:
        return ActionResult(action=payload)
    if tag == ProbeKind.REMOTE.tag:
        return RemoteResult(ref=payload)
    if tag == ProbeKind.COMMIT.tag:
        return CommitResult(sha=payload)
    if tag == ProbeKind.POSITION.tag:
        return PositionResult(label=payload)
    if tag == ProbeKind.STATUS_SCAN.tag:
        entries = tuple(entry for entry in payload.split("\0") if entry)
        return StatusScanResult(entries=entries)

    if tag == ProbeKind.STASH.tag:
        count = _parse_int(payload) if payload else 0
        if count is None:
            return UnknownProbeResult(tag=tag, payload_text=payload)
        return StashResult(count=count)

    if tag in (ProbeKind.INDEX_DIFF.tag, ProbeKind.WORKTREE_DIFF.tag):
        exit_code = _parse_int(payload) if payload else 0
        if exit_code is None:
            return UnknownProbeResult(tag=tag, payload_text=payload)
        return DiffResult(kind=ProbeKind(tag), exit_code=exit_code)

    if tag == ProbeKind.AHEAD_BEHIND.tag:
        if not payload.strip():
            return AheadBehindResult(ahead=0, behind=0)
        parts = payload.split()
        counts = [_parse_int(part) for part in parts]
        if len(counts) != 2 or counts[0] is None or counts[1] is None:
            return UnknownProbeResult(tag=tag, payload_text=payload)
        return AheadBehindResult(ahead=counts[0], behind=counts[1])

    return UnknownProbeResult(tag=tag, payload_text=payload)
