import logging
from pathlib import Path

from keyscan.catalog.loader import load_catalog
from keyscan.catalog.resolver import resolve_candidates
from keyscan.catalog.writer import write_results
from keyscan.common.discovery import find_relevant_files
from keyscan.common.enum import SourceKind
from keyscan.core.config import ScanConfig, settings
from keyscan.core.exceptions import KeyscanError
from keyscan.extract.candidates import KeyCandidate, merge_candidates
from keyscan.extract.markup import extract_markup_keys
from keyscan.extract.parsers import parse_markup, parse_program, read_source
from keyscan.extract.program import extract_program_keys
from keyscan.schemas.report import ResultSet, ScanReport

logger = logging.getLogger(__name__)


def extract_file_keys(
    path: Path, kind: SourceKind, config: ScanConfig = settings
) -> list[KeyCandidate]:
    logger.debug("Scanning %s file %s", kind.value, path)
    source = read_source(path)

    if kind == SourceKind.MARKUP:
        return list(extract_markup_keys(parse_markup(source)))

    tree = parse_program(source, path, strict=config.strict_parsing)
    return extract_program_keys(tree, config.translate_function)


def collect_candidates(
    files: dict[SourceKind, list[Path]], config: ScanConfig = settings
) -> list[KeyCandidate]:
    groups = []

    for kind in (SourceKind.MARKUP, SourceKind.PROGRAM):
        for path in files.get(kind, []):
            try:
                groups.append(extract_file_keys(path, kind, config))
            except KeyscanError:
                logger.error("Stopped scanning at %s", path)
                raise

    return merge_candidates(*groups)


def count_leaves(mapping: dict) -> int:
    return sum(
        count_leaves(value) if isinstance(value, dict) else 1
        for value in mapping.values()
    )


def resolve_and_write(
    candidates: list[KeyCandidate], config: ScanConfig = settings
) -> tuple[ResultSet, Path, Path]:
    catalog = load_catalog(Path(p) for p in config.catalog_files)
    results = resolve_candidates(candidates, catalog)

    translations_path, unresolved_path = write_results(
        results,
        Path(config.output_dir),
        config.translations_filename,
        config.unresolved_filename,
    )
    return results, translations_path, unresolved_path


def run_scan(config: ScanConfig = settings) -> ScanReport:
    files = find_relevant_files(
        Path(config.source_dir),
        config.markup_extensions,
        config.program_extensions,
        config.exclude_dirs,
    )
    candidates = collect_candidates(files, config)
    logger.info("Extracted %d unique translation keys", len(candidates))

    results, translations_path, unresolved_path = resolve_and_write(candidates, config)

    return ScanReport(
        markup_files=len(files[SourceKind.MARKUP]),
        program_files=len(files[SourceKind.PROGRAM]),
        candidates=len(candidates),
        resolved_keys=count_leaves(results.resolved),
        unresolved_keys=count_leaves(results.unresolved),
        translations_path=str(translations_path),
        unresolved_path=str(unresolved_path),
    )


def read_key_list(path: Path) -> list[str]:
    return [line.strip() for line in read_source(path).splitlines() if line.strip()]


def resolve_key_file(keys_path: Path, config: ScanConfig = settings) -> ScanReport:
    candidates = merge_candidates(read_key_list(keys_path))
    results, translations_path, unresolved_path = resolve_and_write(candidates, config)

    return ScanReport(
        markup_files=0,
        program_files=0,
        candidates=len(candidates),
        resolved_keys=count_leaves(results.resolved),
        unresolved_keys=count_leaves(results.unresolved),
        translations_path=str(translations_path),
        unresolved_path=str(unresolved_path),
    )
