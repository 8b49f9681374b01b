from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Protocol


class BlobStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def put(self, key: str, value: str) -> None:
        ...


def _safe_key(key: str) -> str:
    value = str(key or "").strip() or "default"
    return value.replace(":", "_").replace("/", "_").replace("\\", "_")


class JsonDirBlobStore:
    """One ``<key>.json`` file per key under ``root``.

    Read and write errors propagate as ``OSError``; callers decide how
    to degrade.
    """

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def path_for(self, key: str) -> Path:
        return self.root / f"{_safe_key(key)}.json"

    def get(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def put(self, key: str, value: str) -> None:
        path = self.path_for(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(".json.tmp")
        tmp.write_text(value, encoding="utf-8")
        tmp.replace(path)


class MemoryBlobStore:
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def put(self, key: str, value: str) -> None:
        self.data[key] = value
