from __future__ import annotations


class SimulationConfigError(ValueError):
    """Raised when a parameter bundle cannot be simulated."""


class UnsupportedReversalPolicyError(SimulationConfigError):
    def __init__(self, policy: object) -> None:
        super().__init__(f"Unsupported reversal policy: {policy!r}")
        self.policy = policy
