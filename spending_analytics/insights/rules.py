from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence


@dataclass(frozen=True)
class Rule:
    """One row of a decision table: ``kind`` applies when ``when(ctx)`` holds."""

    kind: str
    when: Callable[[Any], bool]
    description: str = ""


def first_match(rules: Sequence[Rule], ctx: Any) -> Optional[Rule]:
    """Evaluate rules top to bottom; the first one whose guard holds wins."""
    for rule in rules:
        if rule.when(ctx):
            return rule
    return None
