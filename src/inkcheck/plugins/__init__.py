"""Script plugins: externally authored rules loaded from a directory.

Importing this package registers the ``Script`` validator with the factory.
"""

from .cache import ScriptCacheEntry, ScriptFileCache, default_cache
from .loader import DEFAULT_SCRIPT_PATH, SCRIPT_SUFFIX, ScriptPluginLoader
from .script import HOOK_NAMES, ScriptPlugin, default_message_resolver
from .validator import (
    ScriptDocumentValidator,
    ScriptSectionValidator,
    ScriptSentenceValidator,
    ScriptValidator,
    build_script_validators,
    create_script_validators,
)

__all__ = [
    "DEFAULT_SCRIPT_PATH",
    "HOOK_NAMES",
    "SCRIPT_SUFFIX",
    "ScriptCacheEntry",
    "ScriptDocumentValidator",
    "ScriptFileCache",
    "ScriptPlugin",
    "ScriptPluginLoader",
    "ScriptSectionValidator",
    "ScriptSentenceValidator",
    "ScriptValidator",
    "build_script_validators",
    "create_script_validators",
    "default_cache",
    "default_message_resolver",
]
