import json
import logging
import logging.config
import os
from pathlib import Path


class KeyscanError(Exception):
    """Base error for failures that halt a scan"""


class SourceReadError(KeyscanError):
    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Unable to read {path}: {reason}")


class SourceParseError(KeyscanError):
    def __init__(self, path: Path, line: int, column: int):
        self.path = path
        self.line = line
        self.column = column
        super().__init__(f"Syntax error in {path} at line {line}, column {column}")


class CatalogError(KeyscanError):
    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Invalid catalog {path}: {reason}")


def expand_env(obj):
    if isinstance(obj, dict):
        return {k: expand_env(v) for k, v in obj.items()}

    elif isinstance(obj, list):
        return [expand_env(i) for i in obj]

    elif isinstance(obj, str) and obj.startswith("${") and obj.endswith("}"):
        expr = obj[2:-1]

        # ${VAR:DEFAULT}
        if ":" in expr:
            name, default = expr.split(":", 1)
            return os.getenv(name, default)

        return os.getenv(expr, "")

    return obj


def setup_logger(config_path: Path | None = None) -> logging.Logger:
    try:
        if config_path is None:
            config_path = Path(__file__).resolve().parent.parent.parent / "logging.json"
        with open(config_path) as f:
            raw = json.load(f)

        logging.config.dictConfig(expand_env(raw))

        return logging.getLogger("keyscan")

    except (OSError, ValueError, TypeError) as e:
        fallback = logging.getLogger("keyscan")
        fallback.setLevel(logging.INFO)

        if not fallback.handlers:
            handler = logging.StreamHandler()
            handler.setLevel(logging.INFO)
            formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
            handler.setFormatter(formatter)
            fallback.addHandler(handler)

        fallback.warning(f"Failed to load logging config. Using fallback. Error: {e}")

        return fallback
