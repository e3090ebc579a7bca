import json
import logging
from pathlib import Path

from keyscan.schemas.report import ResultSet

logger = logging.getLogger(__name__)


def save_json(path: Path, content: dict):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(content, ensure_ascii=False, indent=2), encoding="utf-8")


def write_results(
    results: ResultSet,
    output_dir: Path,
    translations_filename: str,
    unresolved_filename: str,
) -> tuple[Path, Path]:
    translations_path = output_dir / translations_filename
    unresolved_path = output_dir / unresolved_filename

    save_json(translations_path, results.resolved)
    save_json(unresolved_path, results.unresolved)

    logger.info(
        "Translations were generated: %s, %s", translations_path, unresolved_path
    )

    return translations_path, unresolved_path
