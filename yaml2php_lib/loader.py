import logging
import os
from typing import Optional

try:
    import yaml  # type: ignore
except Exception as e:  # pragma: no cover
    raise RuntimeError(
        "PyYAML is required to run this converter. Please install it: pip install pyyaml"
    ) from e

from .errors import LoadError, ParseError

logger = logging.getLogger(__name__)

# Scalars carrying this tag are replaced by the rendered content of the named file.
INCLUDE_TAG = "!include"


def parse(text: str, path: Optional[str] = None) -> Optional[yaml.Node]:
    """
    Compose YAML text into its root node without constructing Python objects.

    Returns None when the text holds no document (empty input or only comments).
    Anchors and aliases are resolved by the composer; tags are left on the nodes as-is,
    which is what keeps `!include` references visible to the emitter.
    """
    try:
        return yaml.compose(text, Loader=yaml.SafeLoader)
    except yaml.YAMLError as e:
        raise ParseError(path, e) from e


def read_text(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(path, e) from e


def load_file(path: str) -> Optional[yaml.Node]:
    logger.debug("Loading YAML file %s", path)
    return parse(read_text(path), path)


def base_dir_for(path: str) -> str:
    """Directory that relative `!include` paths of the file at path resolve against."""
    return os.path.dirname(os.path.abspath(path))
