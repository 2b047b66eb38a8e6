from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Type

from ccmetrics.analysis.base import ComplexityCounter
from ccmetrics.analysis.decision import DecisionPointCounter
from ccmetrics.analysis.graph import ControlFlowGraphCounter
from ccmetrics.analysis.operators import OperatorResolution, Tokenizer
from ccmetrics.core.records import Strategy


COUNTERS: Dict[Strategy, Type[ComplexityCounter]] = {
    Strategy.GRAPH: ControlFlowGraphCounter,
    Strategy.DECISION: DecisionPointCounter,
}


def parse_strategies(name: str) -> List[Strategy]:
    """Map a strategy option (``graph``, ``decision`` or ``both``) to strategies."""
    if name == "both":
        return [Strategy.GRAPH, Strategy.DECISION]
    try:
        return [Strategy(name)]
    except ValueError:
        raise ValueError(f"Unknown strategy: {name}") from None


def load_counters(
    strategies: Iterable[Strategy],
    tokenizer: Optional[Tokenizer] = None,
    resolution: OperatorResolution = OperatorResolution.AUTO,
) -> List[ComplexityCounter]:
    return [COUNTERS[strategy](tokenizer, resolution) for strategy in strategies]
