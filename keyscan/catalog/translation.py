from typing import Any


class Catalog:
    """Merged translation documents, addressed by dotted key paths"""

    def __init__(self, data: dict[str, Any] | None = None):
        self.data = data if data is not None else {}

    def merge(self, document: dict[str, Any]) -> None:
        # later documents win on overlapping top-level keys
        self.data.update(document)

    def lookup(self, key: str) -> Any:
        value: Any = self.data

        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return None
            value = value[part]

        return value
