"""Data models for prompt state."""

from dataclasses import dataclass, field

FIELD_NAMES: tuple[str, ...] = (
    "branch",
    "commit",
    "remote",
    "ahead",
    "behind",
    "diverged",
    "action",
    "stashed",
    "position",
    "indexed",
    "unindexed",
    "untracked",
    "dirty",
    "clean",
)


@dataclass
class FieldValues:
    """Raw field values accumulated by the coordinator during one render.

    Mutable, and only ever touched by the coordinating thread. A fresh
    instance is created for every render.

    Counts use None for "not computed" and an int otherwise. In fast mode the
    diff probes cannot count files, so `indexed`/`unindexed` are set to 1 when
    differences are present.
    """

    branch: str = ""
    commit: str = ""
    remote: str = ""
    ahead: int = 0
    behind: int = 0
    action: str = ""
    stashed: int = 0
    position: str = ""
    indexed: int | None = None
    unindexed: int | None = None
    untracked: int | None = None
    dirty: int | None = None
    status_counted: bool = False  # True when counts come from a verbose scan


@dataclass(frozen=True)
class PromptCache:
    """Last rendered branch and position, carried between renders by the caller.

    Advisory only: the engine never reads it to decide what to compute. It is
    returned so the display layer can tell whether display-relevant state
    changed since the previous render.
    """

    branch: str = ""
    position: str = ""

    def changed_from(self, previous: "PromptCache") -> bool:
        """Check whether branch or position differ from a previous snapshot."""
        return self.branch != previous.branch or self.position != previous.position


@dataclass(frozen=True)
class PromptResult:
    """Result of one engine run."""

    outputs: dict[str, str]
    cache: PromptCache
    formatted: dict[str, str] = field(default_factory=dict)
    in_repo: bool = True
