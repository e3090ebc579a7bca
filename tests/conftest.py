import json

import pytest

from keyscan.extract.markup import extract_markup_keys
from keyscan.extract.parsers import parse_markup, parse_program
from keyscan.extract.program import extract_program_keys


@pytest.fixture
def markup_keys():
    def _extract(html: str) -> list:
        return list(extract_markup_keys(parse_markup(html)))

    return _extract


@pytest.fixture
def program_keys():
    def _extract(source: str) -> list:
        return extract_program_keys(parse_program(source))

    return _extract


@pytest.fixture
def write_json():
    def _write(path, content):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write
