"""Exceptions raised by the simulator.

Configuration mistakes (an unknown preset id or ant count) are ordinary
`ValueError`s the caller can recover from. A corrupted simulation state is
an `AssertionError`: it means the core itself is wrong, not its input.
"""


class UnknownBehavior(ValueError):
    """Raised when a behavior preset id is not in the catalog."""

    def __init__(self, behavior_id):
        super().__init__(f"unknown behavior preset: {behavior_id!r}")
        self.behavior_id = behavior_id


class UnknownAgentCount(ValueError):
    """Raised when the requested number of ants has no placement."""

    def __init__(self, agent_count):
        super().__init__(f"unsupported ant count: {agent_count!r}")
        self.agent_count = agent_count


class InvariantViolation(AssertionError):
    """A cell condition or position fell outside its valid range."""
