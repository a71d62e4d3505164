"""
Validation Engine
==================

Central orchestrator for the passphrase validator. The :class:`Validator`
runs the enabled analyzers in a fixed order and folds their outputs into a
single :class:`~valpass.core.models.MetricResult`.

Policy:
    - Order: entropy, compression, distribution, dictionary, mean.
    - An analyzer error (:class:`InputError`, :class:`ConfigurationError`)
      aborts the call at once; no partial result is returned.
    - A failed threshold is not an error. It clears ``ok`` and evaluation
      continues, so every enabled metric is reported.
    - With every check disabled the verdict is ``ok=True``. The caller
      decides what to enforce.

Architecture follows the Facade pattern (Gamma et al., 1994).
"""

from __future__ import annotations

from typing import Any, Optional

from shared.config import ValpassSettings
from shared.logger import ValpassLogger

from valpass.analyzers.compression import CompressionAnalyzer
from valpass.analyzers.dictionary import DictionaryMatcher
from valpass.analyzers.distribution import DistributionAnalyzer
from valpass.analyzers.entropy import EntropyAnalyzer
from valpass.analyzers.mean import MeanAnalyzer
from valpass.core.alphabet import Passphrase
from valpass.core.errors import ValpassError
from valpass.core.models import Configuration, MetricResult


class Validator:
    """Runs the configured checks against a passphrase.

    The instance holds only analyzers and a logger, so one validator can
    serve concurrent calls on independent inputs.

    Usage::

        validator = Validator()
        result = validator.validate("correct horse", Configuration.defaults())
        if not result.ok:
            print(result.failed_checks)

    Attributes:
        settings: Tool settings (logging destinations and level).
        logger: Logger for the engine.
    """

    def __init__(self, settings: Optional[ValpassSettings] = None) -> None:
        self.settings = settings or ValpassSettings()
        gs = self.settings.global_settings
        self.logger = ValpassLogger(
            "engine",
            log_level=gs.log_level,
            log_file=gs.log_file or None,
            json_logs=gs.log_json,
            console_output=gs.console_logging,
        )

        self._entropy_analyzer = EntropyAnalyzer()
        self._compression_analyzer = CompressionAnalyzer()
        self._distribution_analyzer = DistributionAnalyzer()
        self._dictionary_matcher = DictionaryMatcher()
        self._mean_analyzer = MeanAnalyzer()

    def validate(
        self, passphrase: Passphrase, configuration: Configuration
    ) -> MetricResult:
        """Validate *passphrase* against *configuration*.

        Args:
            passphrase: Text, or raw bytes in ASCII-printable mode.
            configuration: Enabled checks and thresholds.

        Returns:
            The aggregate verdict with the raw value of each metric that ran.

        Raises:
            InputError: The passphrase does not fit the alphabet mode.
            ConfigurationError: The word list is below the minimum size.
        """
        cfg = configuration
        values: dict[str, Any] = {}
        failed: list[str] = []

        self.logger.debug(
            "Validating passphrase",
            operation="validate",
            length=len(passphrase),
            alphabet_mode=cfg.alphabet_mode.value,
        )

        try:
            if cfg.entropy_min_bits_per_symbol > 0:
                entropy = self._entropy_analyzer.analyze(passphrase, cfg.alphabet_mode)
                values["entropy"] = entropy
                self._record(
                    failed, "entropy", entropy,
                    EntropyAnalyzer.passes(entropy, cfg.entropy_min_bits_per_symbol),
                )

            if cfg.compression_min_percent > 0:
                compression = self._compression_analyzer.analyze(passphrase)
                values["compression"] = compression
                self._record(
                    failed, "compression", compression,
                    CompressionAnalyzer.passes(compression, cfg.compression_min_percent),
                )

            if cfg.distribution_min_percent > 0:
                distribution = self._distribution_analyzer.analyze(
                    passphrase, cfg.alphabet_mode
                )
                values["distribution"] = distribution
                self._record(
                    failed, "distribution", distribution,
                    DistributionAnalyzer.passes(distribution, cfg.distribution_min_percent),
                )

            if cfg.word_list is not None:
                match = self._dictionary_matcher.matches(passphrase, cfg.word_list)
                values["dictionary_match"] = match
                self._record(failed, "dictionary", match, not match)

            if cfg.mean_allowed_deviation > 0:
                mean = self._mean_analyzer.analyze(passphrase)
                values["mean"] = mean
                self._record(
                    failed, "mean", mean,
                    self._mean_analyzer.passes(mean, cfg.mean_allowed_deviation),
                )
        except ValpassError as exc:
            self.logger.warning(
                "Validation aborted: %s",
                exc,
                operation="validate",
                error=type(exc).__name__,
            )
            raise

        result = MetricResult(ok=not failed, failed_checks=tuple(failed), **values)
        self.logger.debug(
            "Validation finished: ok=%s",
            result.ok,
            operation="validate",
            failed_checks=list(result.failed_checks),
        )
        return result

    def _record(
        self, failed: list[str], metric: str, value: Any, passed: bool
    ) -> None:
        """Log one metric outcome and remember it if the check failed."""
        self.logger.debug(
            "Metric %s=%s (%s)",
            metric,
            value,
            "pass" if passed else "fail",
            operation="validate",
            metric=metric,
            value=value,
            passed=passed,
        )
        if not passed:
            failed.append(metric)


def validate(passphrase: Passphrase, configuration: Configuration) -> MetricResult:
    """Validate *passphrase* with a default-settings :class:`Validator`.

    See :meth:`Validator.validate`.
    """
    return Validator().validate(passphrase, configuration)
