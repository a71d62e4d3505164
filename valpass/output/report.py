"""
valpass Report Generator
=========================

Builds machine-readable JSON reports from validation results, suitable for
CI pipelines and audit logs. The report records the thresholds that were
applied next to the measured values. It never contains the passphrase or
the words of the dictionary, only the dictionary's size and mode.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from valpass import __version__
from valpass.core.models import Configuration, MetricResult


class ValpassReportGenerator:
    """Generates JSON reports for validation results."""

    def build(
        self, result: MetricResult, configuration: Configuration
    ) -> dict[str, Any]:
        """Assemble the report as a plain dictionary.

        Args:
            result: Outcome of the validation.
            configuration: Configuration the result was produced with.

        Returns:
            Dictionary with ``report_metadata``, ``configuration`` and
            ``result`` sections.
        """
        word_list = configuration.word_list
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": "valpass",
                "version": __version__,
            },
            "configuration": {
                "compression_min_percent": configuration.compression_min_percent,
                "distribution_min_percent": configuration.distribution_min_percent,
                "entropy_min_bits_per_symbol": configuration.entropy_min_bits_per_symbol,
                "mean_allowed_deviation": configuration.mean_allowed_deviation,
                "alphabet_mode": configuration.alphabet_mode.value,
                "dictionary": (
                    {
                        "words": len(word_list),
                        "allow_substring_match": word_list.allow_substring_match,
                    }
                    if word_list is not None
                    else None
                ),
            },
            "result": {
                **result.model_dump(mode="json"),
                "redundancy": result.redundancy,
            },
        }

    def generate_json(
        self,
        result: MetricResult,
        configuration: Configuration,
        output_path: Path,
    ) -> Path:
        """Write the JSON report to *output_path* and return the path."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            json.dumps(
                self.build(result, configuration),
                indent=2,
                ensure_ascii=False,
                default=str,
            ),
            encoding="utf-8",
        )
        return output_path
