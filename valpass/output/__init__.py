"""
valpass Output Module
======================

Console display and report generation for validation results.
"""

from valpass.output.console import ValpassConsoleOutput
from valpass.output.report import ValpassReportGenerator

__all__ = [
    "ValpassConsoleOutput",
    "ValpassReportGenerator",
]
