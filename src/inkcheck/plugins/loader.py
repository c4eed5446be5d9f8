"""Discovery and loading of plugin scripts from a directory."""

import logging
from pathlib import Path

from inkcheck.errors import PluginError, PluginIOError, PluginLoadError
from inkcheck.plugins.cache import ScriptFileCache, default_cache
from inkcheck.plugins.script import MessageResolver, ScriptPlugin

logger = logging.getLogger(__name__)

DEFAULT_SCRIPT_PATH = "plugins"
SCRIPT_SUFFIX = ".py"


class ScriptPluginLoader:
    """Loads every ``*.py`` script in a directory as a plugin."""

    def __init__(self, script_path: str | Path | None = None,
                 cache: ScriptFileCache | None = None,
                 resolver: MessageResolver | None = None):
        """Initialize the loader.

        Args:
            script_path: Plugin directory (default: ``plugins`` in the working directory)
            cache: Source cache; the process-wide default cache when omitted
            resolver: Fallback message resolver handed to each plugin
        """
        self.script_path = Path(script_path or DEFAULT_SCRIPT_PATH)
        self.cache = cache if cache is not None else default_cache
        self.resolver = resolver
        self.failures: list[PluginError] = []

    def discover(self) -> list[Path]:
        """List plugin files, creating the directory if it does not exist yet.

        A path that cannot be listed (a regular file, missing permissions)
        is logged and treated as holding no plugins.
        """
        directory = self.script_path.resolve()
        logger.info(f"Script validators directory: {directory}")

        try:
            if not directory.exists():
                directory.mkdir(parents=True, exist_ok=True)
                logger.info(f"Created empty script directory {directory}")
                return []

            return sorted(
                path for path in directory.iterdir()
                if path.is_file() and path.name.endswith(SCRIPT_SUFFIX)
            )
        except OSError as e:
            logger.error(f"Cannot list script directory {directory}: {e}")
            return []

    def load(self) -> list[ScriptPlugin]:
        """Compile every discovered script.

        A script that cannot be read or compiled is logged, recorded in
        ``failures`` and skipped; the remaining scripts still load.
        """
        self.failures = []
        plugins = []

        for path in self.discover():
            try:
                plugins.append(self.load_file(path))
            except PluginIOError as e:
                logger.error(f"Exception while reading script file: {e}")
                self.failures.append(e)
            except PluginLoadError as e:
                logger.error(f"Exception while compiling script file: {e}")
                self.failures.append(e)

        logger.info(f"Loaded {len(plugins)} script plugins ({len(self.failures)} failed)")
        return plugins

    def load_file(self, path: Path) -> ScriptPlugin:
        source = self.cache.load(path)
        plugin = ScriptPlugin(path.name, source, resolver=self.resolver)
        logger.debug(f"Loaded script plugin {plugin.name}")
        return plugin
