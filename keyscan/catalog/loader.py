import json
import logging
from pathlib import Path
from typing import Iterable

from keyscan.catalog.translation import Catalog
from keyscan.core.exceptions import CatalogError

logger = logging.getLogger(__name__)


def load_json(path: Path) -> dict:
    try:
        content = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise CatalogError(path, "file does not exist") from e
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogError(path, str(e)) from e
    except json.JSONDecodeError as e:
        raise CatalogError(path, f"{e.msg} (line {e.lineno})") from e

    if not isinstance(content, dict):
        raise CatalogError(path, "top-level value must be an object")

    return content


def load_catalog(paths: Iterable[Path]) -> Catalog:
    catalog = Catalog()

    for path in paths:
        document = load_json(Path(path))
        catalog.merge(document)
        logger.debug("Merged %d top-level keys from %s", len(document), path)

    return catalog
