"""
Complexity analysis engine.

Drives function discovery and the configured strategies over a
translation unit and returns one record per (function, strategy) pair in
discovery order.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, List, Optional

from ccmetrics.analysis.base import ComplexityCounter
from ccmetrics.analysis.discovery import FunctionDiscovery
from ccmetrics.config import Config
from ccmetrics.core.records import FunctionRecord
from ccmetrics.core.registry import load_counters
from ccmetrics.parsing.base import SyntaxNode, TranslationUnit
from ccmetrics.parsing.treesitter import parse_file

logger = logging.getLogger(__name__)


class ComplexityAnalyzer:
    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config or Config.default()
        self.strategies = self.config.strategies()
        self.resolution = self.config.operator_resolution()
        self.max_workers = self.config.max_workers()

    def analyze_file(self, path: str) -> List[FunctionRecord]:
        unit = parse_file(path, strict=self.config.strict_parse())
        logger.info("Parsed %s as %s", path, unit.language)
        return self.analyze(unit)

    def analyze(self, unit: TranslationUnit) -> List[FunctionRecord]:
        functions = list(FunctionDiscovery(unit.root))
        counters = load_counters(self.strategies, unit.tokenize, self.resolution)

        if len(functions) > 1 and self.max_workers > 1:
            results: Dict[int, List[FunctionRecord]] = {}
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                futures = {
                    executor.submit(self._analyze_function, function, counters): index
                    for index, function in enumerate(functions)
                }
                for future in as_completed(futures):
                    results[futures[future]] = future.result()
            grouped = [results[index] for index in range(len(functions))]
        else:
            grouped = [self._analyze_function(function, counters) for function in functions]

        records = [record for group in grouped for record in group]
        logger.info("Analyzed %d functions in %s", len(functions), unit.path)
        return records

    def _analyze_function(
        self,
        function: SyntaxNode,
        counters: List[ComplexityCounter],
    ) -> List[FunctionRecord]:
        records = []
        for counter in counters:
            record = FunctionRecord.create(
                function.name,
                function.line,
                counter.complexity(function),
                counter.strategy,
            )
            logger.debug(
                "%s:%d %s complexity %d",
                record.name,
                record.line,
                record.strategy.value,
                record.complexity,
            )
            records.append(record)
        return records
