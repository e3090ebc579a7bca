from dotenv import load_dotenv

load_dotenv()


TRANSLATE_MARKER = "| translate"
TRANSLATE_ATTRIBUTE = "translate"
TRANSLATE_FUNCTION = "instant"
UNABLE_TO_RESOLVE_VALUE = "UNABLE_TO_RESOLVE_VALUE"
QUOTE_CHARS = ("'", '"')

# Parser configuration
HTML_PARSER = "html5lib"
DROPPED_TEXT_ELEMENTS = ["style", "pre"]
TS_FILE_EXTENSION = ".ts"
HTML_FILE_EXTENSION = ".html"
EXCLUDED_DIRS = ["node_modules", ".git", "dist"]

# Output
TRANSLATIONS_FILENAME = "translations.json"
UNRESOLVED_TRANSLATIONS_FILENAME = "unresolved-translations.json"
