"""Data models for prompt state and probe results."""

from gitprompt.status.models.probe_results import (
    ActionResult,
    AheadBehindResult,
    CommitResult,
    DiffResult,
    PositionResult,
    ProbeKind,
    ProbeResult,
    RemoteResult,
    StashResult,
    StatusScanResult,
    UnknownProbeResult,
    decode_probe_line,
    empty_result,
    encode_probe_line,
)
from gitprompt.status.models.status_data import (
    FIELD_NAMES,
    FieldValues,
    PromptCache,
    PromptResult,
)

__all__ = [
    "FIELD_NAMES",
    "ActionResult",
    "AheadBehindResult",
    "CommitResult",
    "DiffResult",
    "FieldValues",
    "PositionResult",
    "ProbeKind",
    "ProbeResult",
    "PromptCache",
    "PromptResult",
    "RemoteResult",
    "StashResult",
    "StatusScanResult",
    "UnknownProbeResult",
    "decode_probe_line",
    "empty_result",
    "encode_probe_line",
]
