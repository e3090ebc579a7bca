import copy
import logging
from typing import Any, Iterable

from keyscan.catalog.translation import Catalog
from keyscan.extract.candidates import KeyCandidate, UnresolvedKey
from keyscan.schemas.report import ResultSet

logger = logging.getLogger(__name__)


def insert_key(container: dict, key_parts: list[str], value: Any):
    part = key_parts[0]

    if len(key_parts) == 1:
        container[part] = value
        return

    if part not in container or not isinstance(container[part], dict):
        container[part] = {}

    insert_key(container[part], key_parts[1:], value)


def file_key(key: str, catalog: Catalog, results: ResultSet) -> bool:
    """File one dotted key; returns True when the catalog had a value for it"""
    path = key.split(".")
    value = catalog.lookup(key)

    if value:
        if isinstance(value, dict):
            value = copy.deepcopy(value)
        insert_key(results.resolved, path, value)
        return True

    insert_key(results.unresolved, path, key)
    return False


def resolve_candidates(candidates: Iterable[KeyCandidate], catalog: Catalog) -> ResultSet:
    results = ResultSet()
    missing = 0

    for candidate in candidates:
        if isinstance(candidate, UnresolvedKey):
            insert_key(results.unresolved, candidate.label.split("."), candidate.label)
            missing += 1
            continue

        keys = (candidate,) if isinstance(candidate, str) else candidate
        for key in keys:
            if not file_key(key, catalog, results):
                missing += 1

    logger.info("%d keys could not be resolved", missing)

    return results
