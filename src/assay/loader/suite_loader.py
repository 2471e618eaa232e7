"""Import a Python file and collect the test suites it defines.

A suite file either lists its suites explicitly in a module-level
SUITES sequence, or defines TestSuite objects as module attributes,
which are collected in definition order.
"""

from __future__ import annotations

import importlib.util
import logging
import sys
from pathlib import Path

from assay.loader.errors import SuiteLoadError
from assay.suite import TestSuite

logger = logging.getLogger(__name__)

SUITES_ATTRIBUTE = "SUITES"


def _import_file(path: Path):
    module_name = f"assay_suite_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise SuiteLoadError(path, "not an importable Python file")

    module = importlib.util.module_from_spec(spec)
    # Registered so dataclasses and pickling inside the file can find it
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        sys.modules.pop(module_name, None)
        raise SuiteLoadError(path, f"import failed: {type(exc).__name__}: {exc}") from exc
    return module


def load_suites(path: Path | str) -> list[TestSuite]:
    """Load every TestSuite defined by the Python file at *path*.

    Args:
        path: Path to a .py file.

    Returns:
        Suites in the order they should run.

    Raises:
        SuiteLoadError: If the file is missing, fails to import, has a
            malformed SUITES attribute, or defines no suites.
    """
    path = Path(path)
    if not path.is_file():
        raise SuiteLoadError(path, "file not found")
    if path.suffix != ".py":
        raise SuiteLoadError(path, "suite files must be Python (.py) files")

    module = _import_file(path)

    declared = getattr(module, SUITES_ATTRIBUTE, None)
    if declared is not None:
        suites = list(declared) if isinstance(declared, (list, tuple)) else None
        if suites is None or not all(isinstance(s, TestSuite) for s in suites):
            raise SuiteLoadError(path, f"{SUITES_ATTRIBUTE} must be a list of TestSuite objects")
    else:
        suites = [value for value in vars(module).values() if isinstance(value, TestSuite)]

    if not suites:
        raise SuiteLoadError(path, "no TestSuite objects found")

    logger.info("Loaded %d suite(s) from %s", len(suites), path)
    return suites
