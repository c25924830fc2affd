"""
In-memory profile for one authoring session.
"""
from __future__ import annotations

import copy
from typing import Any, Sequence

from portfolio_forge.schema_profile import new_profile


class ProfileStore:
    """Owns the mutable profile dict. Only the StepController writes to it."""

    def __init__(self, data: dict | None = None):
        self.data = copy.deepcopy(data) if data is not None else new_profile()

    def reset(self) -> None:
        self.data = new_profile()

    def snapshot(self) -> dict:
        """Deep copy handed to compilers so they never share state with the store."""
        return copy.deepcopy(self.data)

    def get(self, path: Sequence[str]) -> Any:
        node: Any = self.data
        for part in path:
            node = node[part]
        return node

    def set(self, path: Sequence[str], value: Any) -> None:
        *parents, leaf = path
        node = self.data
        for part in parents:
            node = node.setdefault(part, {})
        node[leaf] = value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ProfileStore):
            return self.data == other.data
        return NotImplemented

    def __repr__(self) -> str:
        name = self.data.get("personal", {}).get("full_name") or "<empty>"
        return (
            f"ProfileStore({name!r}, skills={len(self.data['skills'])}, "
            f"education={len(self.data['education'])}, projects={len(self.data['projects'])})"
        )
