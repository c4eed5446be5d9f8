"""Modification-time keyed cache for plugin script sources."""

import logging
import threading
from dataclasses import dataclass
from pathlib import Path

from inkcheck.errors import PluginIOError

logger = logging.getLogger(__name__)


@dataclass
class ScriptCacheEntry:
    """Last loaded content of a script and the mtime it was read at."""
    mtime_ns: int
    content: str


class ScriptFileCache:
    """Cache of script sources keyed by absolute path.

    A file is re-read only when its modification time differs from the one
    recorded at the previous load.
    """

    def __init__(self):
        self._entries: dict[Path, ScriptCacheEntry] = {}
        self._lock = threading.Lock()

    def load(self, path: Path) -> str:
        """Return the content of ``path``, reading it only if it changed.

        Raises:
            PluginIOError: If the file cannot be stat'ed or read
        """
        path = Path(path).resolve()
        with self._lock:
            try:
                mtime_ns = path.stat().st_mtime_ns
            except OSError as e:
                raise PluginIOError(f"Cannot access script {path}: {e}", plugin=path.name)

            entry = self._entries.get(path)
            if entry is not None and entry.mtime_ns == mtime_ns:
                logger.debug(f"Using cached script {path}")
                return entry.content

            content = self._read(path)
            self._entries[path] = ScriptCacheEntry(mtime_ns=mtime_ns, content=content)
            return content

    def _read(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PluginIOError(f"Cannot read script {path}: {e}", plugin=path.name)

    def get(self, path: Path) -> ScriptCacheEntry | None:
        return self._entries.get(Path(path).resolve())

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


# Shared by loaders that are not handed a cache of their own, so repeated
# loads in one process skip unchanged files.
default_cache = ScriptFileCache()
