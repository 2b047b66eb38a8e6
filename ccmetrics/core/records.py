from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

ANONYMOUS = "<anonymous>"


class Strategy(Enum):
    """Complexity counting strategies."""
    GRAPH = "graph"
    DECISION = "decision"


@dataclass(frozen=True)
class FunctionRecord:
    line: int
    name: str
    complexity: int
    strategy: Strategy

    @classmethod
    def create(cls, name: str | None, line: int | None, complexity: int, strategy: Strategy) -> "FunctionRecord":
        """Normalize the name to a single whitespace-free word."""
        cleaned = "".join((name or "").split()) or ANONYMOUS
        return cls(line=line or 0, name=cleaned, complexity=complexity, strategy=strategy)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "line": self.line,
            "name": self.name,
            "complexity": self.complexity,
            "strategy": self.strategy.value,
        }
