#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/prosetree/utils/decorators.py
"""Utility decorators for prosetree parsers and serializers.

The HTML importer needs BeautifulSoup and the YAML surface needs PyYAML.
Both are checked at call time so that a broken environment yields a
:class:`~prosetree.exceptions.DependencyError` with install instructions
rather than a bare ``ImportError``.

"""

from __future__ import annotations

import importlib
from functools import wraps
from typing import Any, Callable, List, Tuple

from prosetree.exceptions import DependencyError
from prosetree.utils.packages import check_version_requirement


def requires_dependencies(converter_name: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Check required dependencies and versions before method execution.

    Parameters
    ----------
    converter_name : str
        Name of the converter (e.g., "html", "yaml"). This appears in error
        messages to help users identify which surface needs dependencies.
    packages : list of tuple
        Required packages as (install_name, import_name, version_spec) tuples where:
        - install_name: Package name for pip install (e.g., "beautifulsoup4")
        - import_name: Module name for import statement (e.g., "bs4")
        - version_spec: Version requirement (e.g., ">=4.12.0" or "" for any version)

    Returns
    -------
    Callable
        Decorated callable that checks dependencies before execution

    Raises
    ------
    DependencyError
        If any required package is missing or has an incompatible version.

    Examples
    --------
        >>> @requires_dependencies("yaml", [("pyyaml", "yaml", ">=6.0")])
        ... def load(text):
        ...     import yaml
        ...     return yaml.safe_load(text)

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing = []
            version_mismatches = []
            original_error = None

            for install_name, import_name, version_spec in packages:
                try:
                    # nosemgrep: python.lang.security.audit.non-literal-import.non-literal-import
                    importlib.import_module(import_name)

                    if version_spec:
                        meets_requirement, installed_version = check_version_requirement(install_name, version_spec)
                        if not meets_requirement:
                            version_mismatches.append((install_name, version_spec, installed_version or "unknown"))

                except ImportError as e:
                    missing.append((install_name, version_spec))
                    if original_error is None:
                        original_error = e

            if missing or version_mismatches:
                raise DependencyError(
                    converter_name=converter_name,
                    missing_packages=missing,
                    version_mismatches=version_mismatches,
                    original_import_error=original_error,
                ) from original_error

            return method(*args, **kwargs)

        return wrapper

    return decorator
