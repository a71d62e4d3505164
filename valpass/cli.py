"""
valpass CLI
============

Click-based command-line interface for the passphrase validator.

Usage::

    valpass check 'correct horse battery staple'
    valpass check --wordlist /usr/share/dict/words --submatch 'hunter2'
    valpass -o json check --entropy 3.5 --mean-deviation 20 'S3cr3t!'
    printf '%s\\n' "$PASS" | valpass check -

Exit codes:
    0  passphrase accepted
    1  passphrase rejected by at least one check
    2  invalid input or configuration (no verdict)
"""

from __future__ import annotations

import dataclasses
import json
from pathlib import Path
from typing import Optional

import click

from shared.config import ValpassSettings
from shared.console import ValpassConsole
from shared.logger import ValpassLogger

from valpass import __version__
from valpass.collectors.wordlist import load_wordlist
from valpass.core.engine import Validator
from valpass.core.errors import ValpassError
from valpass.core.models import AlphabetMode, Configuration, MetricResult, WordList
from valpass.output.console import ValpassConsoleOutput
from valpass.output.report import ValpassReportGenerator

EXIT_OK: int = 0
EXIT_WEAK: int = 1
EXIT_ERROR: int = 2


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.version_option(__version__, prog_name="valpass")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a valpass settings file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default=None,
    help="Output format (default from settings, else console).",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the JSON report to this file.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress all output on stdout, JSON included; rely on the exit code.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Log every metric to stderr.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: Optional[str],
    output_file: Optional[str],
    quiet: bool,
    verbose: bool,
) -> None:
    """valpass -- statistical passphrase quality checks.

    Measures compressibility, character distribution, Shannon entropy,
    byte mean and dictionary membership, and compares each against a
    threshold.
    """
    ctx.ensure_object(dict)

    settings = ValpassSettings.load(config) if config else ValpassSettings()
    gs = settings.global_settings
    if verbose:
        gs.console_logging = True
        gs.log_level = "DEBUG"

    ctx.obj["settings"] = settings
    ctx.obj["output_format"] = output or gs.output_format
    ctx.obj["output_file"] = output_file
    ctx.obj["quiet"] = quiet

    console = ValpassConsole(quiet=quiet)
    ctx.obj["console"] = console
    ctx.obj["logger"] = ValpassLogger(
        "cli",
        log_level=gs.log_level,
        log_file=gs.log_file or None,
        json_logs=gs.log_json,
        console_output=gs.console_logging,
    )
    ctx.obj["validator"] = Validator(settings)
    ctx.obj["display"] = ValpassConsoleOutput(console)
    ctx.obj["reporter"] = ValpassReportGenerator()


def _handle_output(
    ctx: click.Context, result: MetricResult, configuration: Configuration
) -> None:
    """Print or save the result in the selected format."""
    console: ValpassConsole = ctx.obj["console"]
    reporter: ValpassReportGenerator = ctx.obj["reporter"]
    output_file = ctx.obj["output_file"]

    if ctx.obj["output_format"] == "json":
        if output_file:
            path = reporter.generate_json(result, configuration, Path(output_file))
            console.success(f"JSON report saved to: {path}")
        elif not ctx.obj["quiet"]:
            click.echo(json.dumps(
                reporter.build(result, configuration),
                indent=2,
                ensure_ascii=False,
                default=str,
            ))
    else:
        display: ValpassConsoleOutput = ctx.obj["display"]
        display.display_result(result, configuration)
        if output_file:
            path = reporter.generate_json(result, configuration, Path(output_file))
            console.success(f"JSON report saved to: {path}")


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("passphrase")
@click.option(
    "--compress",
    type=click.IntRange(min=0),
    default=None,
    help="Maximum compression rate in percent (0 disables).",
)
@click.option(
    "--distribution",
    type=click.FloatRange(min=0),
    default=None,
    help="Minimum character distribution in percent (0 disables).",
)
@click.option(
    "--entropy",
    type=click.FloatRange(min=0),
    default=None,
    help="Minimum entropy in bits per symbol (0 disables).",
)
@click.option(
    "--mean-deviation",
    type=click.FloatRange(min=0),
    default=None,
    help="Allowed deviation of the byte mean from 80 (0 disables).",
)
@click.option(
    "--wordlist", "-w",
    type=click.Path(dir_okay=False),
    default=None,
    help="Newline-separated dictionary file (at least 5000 words).",
)
@click.option(
    "--submatch",
    is_flag=True,
    default=False,
    help="Reject passphrases contained in any dictionary word.",
)
@click.option(
    "--unicode", "unicode_mode",
    is_flag=True,
    default=False,
    help="Count Unicode codepoints instead of printable ASCII bytes.",
)
@click.pass_context
def check(
    ctx: click.Context,
    passphrase: str,
    compress: Optional[int],
    distribution: Optional[float],
    entropy: Optional[float],
    mean_deviation: Optional[float],
    wordlist: Optional[str],
    submatch: bool,
    unicode_mode: bool,
) -> None:
    """Validate PASSPHRASE (use - to read one line from stdin)."""
    settings: ValpassSettings = ctx.obj["settings"]
    console: ValpassConsole = ctx.obj["console"]
    logger: ValpassLogger = ctx.obj["logger"]
    validator: Validator = ctx.obj["validator"]

    if passphrase == "-":
        passphrase = click.get_text_stream("stdin").readline().rstrip("\r\n")

    vcfg = dataclasses.replace(settings.validator)
    if compress is not None:
        vcfg.compression_min_percent = compress
    if distribution is not None:
        vcfg.distribution_min_percent = distribution
    if entropy is not None:
        vcfg.entropy_min_bits_per_symbol = entropy
    if mean_deviation is not None:
        vcfg.mean_allowed_deviation = mean_deviation
    if unicode_mode:
        vcfg.alphabet_mode = AlphabetMode.UNICODE_CODEPOINT.value

    wordlist_path = wordlist or vcfg.wordlist_path
    if submatch and not wordlist_path:
        raise click.UsageError("--submatch requires a word list (--wordlist)")

    try:
        word_list: Optional[WordList] = None
        if wordlist_path:
            with logger.operation("wordlist_load"):
                word_list = load_wordlist(
                    wordlist_path,
                    allow_substring_match=submatch or vcfg.wordlist_submatch,
                )
                logger.info("Loaded %d words from %s", len(word_list), wordlist_path)

        configuration = Configuration.from_settings(vcfg, word_list)
        with logger.timed("validation"):
            result = validator.validate(passphrase, configuration)
    except (ValpassError, ValueError) as exc:
        logger.error(
            "Check aborted: %s", exc, operation="check", error=type(exc).__name__
        )
        console.error(str(exc))
        ctx.exit(EXIT_ERROR)

    _handle_output(ctx, result, configuration)
    ctx.exit(EXIT_OK if result.ok else EXIT_WEAK)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the valpass CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
