"""Loads host test modules so their registrations run.

Identifiers are either paths to ``.py`` files or dotted module names.
Every load executes the module afresh, so its registrations reach the
context being populated even if the module was imported before.
"""

import importlib.util
import logging
import sys
from importlib.machinery import ModuleSpec
from pathlib import Path
from types import ModuleType
from typing import Iterable, Optional, Union

from .registry import RegistrationContext, activate
from .schema import Forest

logger = logging.getLogger(__name__)


class ModuleLoadError(RuntimeError):
    """Raised when a test module cannot be located or imported."""

    def __init__(self, identifier: str, reason: str):
        super().__init__(f"Cannot load '{identifier}': {reason}")
        self.identifier = identifier
        self.reason = reason


def find_module_spec(identifier: Union[str, Path]) -> ModuleSpec:
    """Locate a test module by file path or dotted name.

    Raises:
        ModuleLoadError: If the module cannot be found.
    """
    identifier = str(identifier)
    path = Path(identifier)

    if path.suffix == ".py" or path.exists():
        if not path.is_file():
            raise ModuleLoadError(identifier, "file not found")
        path = path.resolve()
        # Unique per path so two files named alike do not collide in sys.modules.
        module_name = f"_suite_runner_{abs(hash(str(path))):x}_{path.stem}"
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise ModuleLoadError(identifier, "not an importable Python file")
        return spec

    try:
        spec = importlib.util.find_spec(identifier)
    except (ImportError, ValueError) as e:
        raise ModuleLoadError(identifier, str(e)) from e
    if spec is None or spec.loader is None:
        raise ModuleLoadError(identifier, f"No module named '{identifier}'")
    return spec


def module_key(spec: ModuleSpec) -> str:
    """Identity of a module: its source file when it has one."""
    if spec.origin and spec.has_location:
        return str(Path(spec.origin).resolve())
    return spec.name


def load_module(identifier: Union[str, Path]) -> ModuleType:
    """Execute one test module by file path or dotted name.

    The module object in ``sys.modules`` is replaced by the fresh one.

    Raises:
        ModuleLoadError: If the module is missing or raises on import.
    """
    return _execute(str(identifier), find_module_spec(identifier))


def _execute(identifier: str, spec: ModuleSpec) -> ModuleType:
    logger.debug("Loading %s as %s", identifier, spec.name)
    module = importlib.util.module_from_spec(spec)
    previous = sys.modules.get(spec.name)
    sys.modules[spec.name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        if previous is not None:
            sys.modules[spec.name] = previous
        else:
            sys.modules.pop(spec.name, None)
        raise ModuleLoadError(identifier, f"{type(e).__name__}: {e}") from e
    return module


def load_forest(
    identifiers: Iterable[Union[str, Path]],
    context: Optional[RegistrationContext] = None,
) -> Forest:
    """Load each module in order against one context and freeze it.

    A module named more than once, by path or by dotted name, is loaded
    only the first time.

    Args:
        identifiers: Test module paths or dotted names.
        context: Context to register into. A fresh one by default.

    Returns:
        The frozen forest.
    """
    context = context or RegistrationContext()
    seen: set[str] = set()
    with activate(context):
        for identifier in identifiers:
            spec = find_module_spec(identifier)
            key = module_key(spec)
            if key in seen:
                logger.warning("Skipping '%s': module already loaded", identifier)
                continue
            seen.add(key)
            _execute(str(identifier), spec)
    return context.freeze()
