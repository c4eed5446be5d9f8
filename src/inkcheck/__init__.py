"""inkcheck - configurable prose validation with script plugins.

inkcheck runs document, section and sentence level validators over parsed
text documents and hosts externally written rule scripts alongside the
built-in rules.
"""

__version__ = "0.1.0"
__description__ = "Configurable prose validation with script plugins"

from inkcheck.config import InkcheckConfig, load_config
from inkcheck.pipeline import ValidationPipeline

__all__ = [
    "__version__",
    "__description__",
    "InkcheckConfig",
    "ValidationPipeline",
    "load_config",
]
