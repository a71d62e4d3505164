"""
valpass Console Output
=======================

Rich-based console display for validation results: one row per metric
with the value a random passphrase would reach, the configured threshold,
the measured value and a pass/fail status, followed by the overall
verdict.
"""

from __future__ import annotations

import math
from typing import Optional

from shared.console import ValpassConsole
from valpass.analyzers.mean import MEAN_CENTER
from valpass.core.alphabet import MAX_CHARS
from valpass.core.models import AlphabetMode, Configuration, MetricResult

_PASS = "[valpass.pass]PASS[/valpass.pass]"
_FAIL = "[valpass.fail]FAIL[/valpass.fail]"
_OFF = "[valpass.dim]off[/valpass.dim]"


class ValpassConsoleOutput:
    """Console output formatter for :class:`MetricResult`.

    Usage::

        output = ValpassConsoleOutput(ValpassConsole())
        output.display_result(result, configuration)
    """

    def __init__(self, console: Optional[ValpassConsole] = None) -> None:
        self.console = console or ValpassConsole()

    def display_result(
        self, result: MetricResult, configuration: Configuration
    ) -> None:
        """Print the metric table and the verdict."""
        cfg = configuration
        failed = set(result.failed_checks)

        def status(enabled: bool, check: str) -> str:
            if not enabled:
                return _OFF
            return _FAIL if check in failed else _PASS

        # Entropy a uniformly random passphrase approaches in ASCII mode.
        random_entropy = (
            f"{math.log2(MAX_CHARS):.2f} bits/char"
            if cfg.alphabet_mode is AlphabetMode.ASCII_PRINTABLE
            else "n/a"
        )

        dist_on = cfg.distribution_min_percent > 0
        rows = [
            (
                "Compression rate",
                "0%",
                f"max {cfg.compression_min_percent}%",
                f"{result.compression}%",
                status(cfg.compression_min_percent > 0, "compression"),
            ),
            (
                "Character distribution",
                "100%",
                f"min {cfg.distribution_min_percent:.2f}%",
                f"{result.distribution:.2f}%",
                status(dist_on, "distribution"),
            ),
            (
                "Character entropy",
                random_entropy,
                f"min {cfg.entropy_min_bits_per_symbol:.2f}",
                f"{result.entropy:.2f} bits/char",
                status(cfg.entropy_min_bits_per_symbol > 0, "entropy"),
            ),
            (
                "Character redundancy",
                "0.0%",
                f"max {100 - cfg.distribution_min_percent:.2f}%",
                f"{result.redundancy:.2f}%",
                status(dist_on, "distribution"),
            ),
            (
                "Byte mean",
                f"{MEAN_CENTER:.1f}",
                f"{MEAN_CENTER:.0f} ± {cfg.mean_allowed_deviation:.1f}",
                f"{result.mean:.2f}",
                status(cfg.mean_allowed_deviation > 0, "mean"),
            ),
            (
                "Dictionary match",
                "false",
                "false",
                str(result.dictionary_match).lower(),
                status(cfg.word_list is not None, "dictionary"),
            ),
        ]

        self.console.section("Passphrase Quality")
        self.console.table(
            "Metrics",
            ["Metric", "Random", "Threshold", "Result", "Status"],
            rows,
            caption=f"alphabet: {cfg.alphabet_mode.value}",
            justify=["left", "right", "right", "right", "center"],
        )

        if result.ok:
            self.console.success("Validation response: passphrase accepted")
        else:
            self.console.warning(
                "Validation response: passphrase rejected "
                f"({', '.join(result.failed_checks)})"
            )
