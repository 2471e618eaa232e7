"""Assay loaders - suite files and configuration error reporting."""

from assay.loader.errors import ConfigErrorDetail, SuiteLoadError, config_error_details
from assay.loader.suite_loader import load_suites

__all__ = [
    "ConfigErrorDetail",
    "SuiteLoadError",
    "config_error_details",
    "load_suites",
]
