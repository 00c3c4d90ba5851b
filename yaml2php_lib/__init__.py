"""
yaml2php: convert YAML documents into PHP source files that return an equivalent array literal,
so configuration written in YAML can be loaded by PHP without a YAML parser at runtime.

Public API:
- from_file(path: str, pretty: bool = False, indent: int = 4) -> str
- from_string(text: str, pretty: bool = False, indent: int = 4, base_dir: str | None = None) -> str
- Emitter(base_dir, pretty=False, indent=4).render(node) -> str  (for already composed PyYAML nodes)

The converter supports:
- Maps and sequences rendered as nested array(...) literals; scalars typed as string, bool, int,
  float or null using PyYAML's resolution rules.
- Pretty printing with a configurable number of spaces per nesting level.
- Merge keys (<<) are dropped from the output rather than merged.
- `!include relative/file.yaml` splices another YAML document in place, resolved against the
  directory of the top-level file. Include cycles raise IncludeCycleError.
- A string scalar of the exact form "%PHP{EXPR}" is written as the bare PHP expression EXPR.
"""
from .converter import from_file, from_string
from .emitter import Emitter
from .errors import ConversionError, IncludeCycleError, LoadError, ParseError, UnsupportedNodeError

__all__ = [
    "from_file",
    "from_string",
    "Emitter",
    "ConversionError",
    "LoadError",
    "ParseError",
    "IncludeCycleError",
    "UnsupportedNodeError",
]
