"""Command line front end for validating data files."""

from .report import ValidationReport
from .run_validate import main
