"""Loading collections and registry modules for the command line."""

import importlib.util
import json
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

from .errors import InputError
from .registry import Registry

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def load_collection(path: str | Path) -> Any:
    """Load a collection from a JSON or YAML file.

    Args:
        path: File with a ``.json``, ``.yaml`` or ``.yml`` suffix

    Returns:
        The decoded mapping or list

    Raises:
        InputError: If the file is missing, unsupported or malformed
    """
    path = Path(path)
    if not path.exists():
        raise InputError(f"Collection file not found: {path}")

    suffix = path.suffix.lower()
    try:
        with open(path) as f:
            if suffix == ".json":
                data = json.load(f)
            elif suffix in YAML_SUFFIXES:
                data = yaml.safe_load(f)
            else:
                raise InputError(f"Unsupported collection format: {path.suffix or path.name}")
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise InputError(f"Error reading {path}: {e}") from e

    if not isinstance(data, (dict, list)):
        raise InputError(f"{path} must contain a mapping or a list, got {type(data).__name__}")
    return data


def load_registry_module(path: str | Path, registry: Registry) -> Any:
    """Import a Python file that registers template targets.

    The module may register into the global registry at import time. If it
    defines ``register(registry)``, that function is called with ``registry``.

    Returns:
        The imported module
    """
    full_path = Path(path).resolve()
    if not full_path.exists():
        raise InputError(f"Registry module not found: {full_path}")

    spec = importlib.util.spec_from_file_location(full_path.stem, full_path)
    if spec is None or spec.loader is None:
        raise InputError(f"Cannot load module: {full_path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = module
    try:
        spec.loader.exec_module(module)

        hook = getattr(module, "register", None)
        if callable(hook) and getattr(hook, "__module__", None) == module.__name__:
            hook(registry)
    except Exception as e:
        sys.modules.pop(spec.name, None)
        raise InputError(f"Error loading registry module {full_path}: {e}") from e

    logger.info("Loaded registry module %s (%d names registered)", full_path.name, len(registry))
    return module
