"""
Per-issue reaction tally.
"""

from collections.abc import Iterator, Mapping


class ReactionTally:
    """
    Mapping of issue id to a non-negative reaction count.

    Contributions for the same id accumulate, so partial tallies can be
    merged in any order.

    Usage:
        tally = ReactionTally()
        tally.add(42, 3)
        tally.add(42, 1)
        tally[42]  # 4
    """

    def __init__(self, counts: Mapping[int, int] | None = None):
        self._counts: dict[int, int] = {}
        if counts:
            for issue_id, count in counts.items():
                self.add(issue_id, count)

    def add(self, issue_id: int, count: int) -> None:
        """Insert the id with 0 if missing, then add ``count``."""
        if count < 0:
            raise ValueError(f"Reaction count cannot be negative (issue #{issue_id}: {count})")
        self._counts[issue_id] = self._counts.get(issue_id, 0) + count

    def merge(self, other: "ReactionTally") -> "ReactionTally":
        """Add every count of ``other`` into this tally and return self."""
        for issue_id, count in other.items():
            self.add(issue_id, count)
        return self

    def items(self):
        return self._counts.items()

    def as_dict(self) -> dict[int, int]:
        return dict(self._counts)

    def __getitem__(self, issue_id: int) -> int:
        return self._counts[issue_id]

    def __contains__(self, issue_id: object) -> bool:
        return issue_id in self._counts

    def __iter__(self) -> Iterator[int]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ReactionTally):
            return self._counts == other._counts
        if isinstance(other, Mapping):
            return self._counts == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"ReactionTally({self._counts!r})"
