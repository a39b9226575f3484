"""Concurrent prompt state aggregation."""

from gitprompt.status.engine import ProbeRun, compute_prompt, run_probes
from gitprompt.status.planner import plan_probes
from gitprompt.status.runner import ProbeRunner

__all__ = [
    "ProbeRun",
    "ProbeRunner",
    "compute_prompt",
    "plan_probes",
    "run_probes",
]
