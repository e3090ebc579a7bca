from pydantic_settings import BaseSettings

from keyscan.common.constants import (
    EXCLUDED_DIRS,
    HTML_FILE_EXTENSION,
    TRANSLATE_FUNCTION,
    TRANSLATIONS_FILENAME,
    TS_FILE_EXTENSION,
    UNRESOLVED_TRANSLATIONS_FILENAME,
)


class ScanConfig(BaseSettings):
    source_dir: str = "."
    markup_extensions: list[str] = [HTML_FILE_EXTENSION]
    program_extensions: list[str] = [TS_FILE_EXTENSION]
    exclude_dirs: list[str] = EXCLUDED_DIRS
    catalog_files: list[str] = []
    output_dir: str = "."
    translations_filename: str = TRANSLATIONS_FILENAME
    unresolved_filename: str = UNRESOLVED_TRANSLATIONS_FILENAME
    translate_function: str = TRANSLATE_FUNCTION
    strict_parsing: bool = False

    class Config:
        env_prefix = "KEYSCAN_"


settings = ScanConfig()
