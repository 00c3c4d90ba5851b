import logging
import math
import os
import re
from typing import Callable, Optional, Tuple

try:
    import yaml  # type: ignore
    from yaml.constructor import SafeConstructor
except Exception as e:  # pragma: no cover
    raise RuntimeError(
        "PyYAML is required to run this converter. Please install it: pip install pyyaml"
    ) from e

from .errors import IncludeCycleError, UnsupportedNodeError
from .loader import INCLUDE_TAG, load_file

logger = logging.getLogger(__name__)

PHP_EXPR_PATTERN = re.compile(r"%PHP\{(.*)\}")
MERGE_KEY = "<<"

_SCALAR_TYPES = {
    "tag:yaml.org,2002:str": "string",
    # PHP has no date literal; timestamps stay text
    "tag:yaml.org,2002:timestamp": "string",
    "tag:yaml.org,2002:bool": "bool",
    "tag:yaml.org,2002:int": "int",
    "tag:yaml.org,2002:float": "float",
    "tag:yaml.org,2002:null": "null",
}

# Only its stateless construct_yaml_* helpers are used.
_constructor = SafeConstructor()


def scalar_type(node: yaml.ScalarNode) -> str:
    """Classify a scalar as one of string, bool, int, float or null. Unknown tags count as null."""
    return _SCALAR_TYPES.get(node.tag, "null")


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NAN"
    if math.isinf(value):
        return "INF" if value > 0 else "-INF"
    return repr(value)


def format_scalar(node: yaml.ScalarNode) -> str:
    kind = scalar_type(node)
    try:
        if kind == "string":
            return format_string(node.value)
        if kind == "bool":
            return "true" if _constructor.construct_yaml_bool(node) else "false"
        if kind == "int":
            return str(_constructor.construct_yaml_int(node))
        if kind == "float":
            return _format_float(_constructor.construct_yaml_float(node))
    except (IndexError, KeyError, ValueError):
        # explicitly tagged scalars whose text does not parse, e.g. `!!int abc` or `!!int ''`
        logger.debug("Scalar %r does not parse as %s, rendering null", node.value, kind)
    return "null"


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def _single_quote(content: str) -> str:
    return "'" + content.replace("\\", "\\\\").replace("'", "\\'") + "'"


def _double_quote(content: str) -> str:
    escaped = content.replace("\\", "\\\\").replace('"', '\\"').replace("$", "\\$")
    return '"' + escaped + '"'


def format_string(value: str) -> str:
    """
    Render a string scalar as a PHP string literal.

    A value of the exact form %PHP{expr} is emitted as the bare expression `expr`, letting YAML
    reference PHP constants or calls. Strings holding a double quote but no single quote are
    double-quoted; everything else is single-quoted.
    """
    content = _strip_quotes(f'"{value}"')
    match = PHP_EXPR_PATTERN.fullmatch(content)
    if match:
        return match.group(1)
    if "'" in content:
        return _single_quote(content)
    if '"' in content:
        return _double_quote(content)
    return _single_quote(content)


def is_merge_key(key: yaml.Node) -> bool:
    return isinstance(key, yaml.ScalarNode) and key.value == MERGE_KEY


class Emitter:
    """
    Renders a composed YAML node graph as a PHP array literal.

    Nesting depth is passed down each render call. An `!include` is rendered by a child emitter
    that shares this one's settings and starts at the depth of the include site, so the spliced
    text lines up with its surroundings in pretty mode.
    """

    def __init__(
        self,
        base_dir: str,
        pretty: bool = False,
        indent: int = 4,
        depth: int = 0,
        include_chain: Tuple[str, ...] = (),
        load: Callable[[str], Optional[yaml.Node]] = load_file,
    ) -> None:
        if indent < 0:
            raise ValueError(f"indent must not be negative, got {indent}")
        self.base_dir = base_dir
        self.pretty = pretty
        self.indent = indent
        self.depth = depth
        self.include_chain = tuple(include_chain)
        self.load = load

    def render(self, node: yaml.Node, depth: Optional[int] = None) -> str:
        if depth is None:
            depth = self.depth
        return self._render(node, depth, ())

    def _render(self, node: yaml.Node, depth: int, active: Tuple[int, ...]) -> str:
        # active holds the ids of the collections being rendered above node
        if isinstance(node, yaml.ScalarNode):
            if node.tag == INCLUDE_TAG:
                return self.resolve_include(node, depth)
            return format_scalar(node)
        if isinstance(node, yaml.Node) and node.tag == INCLUDE_TAG:
            raise UnsupportedNodeError(node, f"{INCLUDE_TAG} expects a scalar file path")
        if isinstance(node, (yaml.MappingNode, yaml.SequenceNode)):
            if id(node) in active:
                raise UnsupportedNodeError(node, "recursive alias")
            active = active + (id(node),)
        if isinstance(node, yaml.MappingNode):
            pairs = [
                self.render_mapping(key, value, depth + 1, active)
                for key, value in node.value
                if not is_merge_key(key)
            ]
            return "array(" + ", ".join(pairs) + self._pretty(")", depth)
        if isinstance(node, yaml.SequenceNode):
            items = [self._pretty(self._render(item, depth + 1, active), depth + 1) for item in node.value]
            return "array(" + ", ".join(items) + self._pretty(")", depth)
        raise UnsupportedNodeError(node)

    def render_mapping(
        self, key: yaml.Node, value: yaml.Node, depth: int, active: Tuple[int, ...] = ()
    ) -> str:
        if not isinstance(key, yaml.ScalarNode):
            raise UnsupportedNodeError(key, "mapping keys must be scalars")
        if key.tag == INCLUDE_TAG:
            raise UnsupportedNodeError(key, f"{INCLUDE_TAG} is not allowed as a mapping key")
        return self._pretty(f"{format_scalar(key)} => {self._render(value, depth, active)}", depth)

    def resolve_include(self, node: yaml.ScalarNode, depth: int) -> str:
        path = os.path.join(self.base_dir, node.value)
        target = os.path.abspath(path)
        if target in self.include_chain:
            raise IncludeCycleError(self.include_chain + (target,))
        logger.debug("Including %s at depth %d", path, depth)
        root = self.load(path)
        if root is None:
            return "null"
        child = Emitter(
            self.base_dir,
            pretty=self.pretty,
            indent=self.indent,
            depth=depth,
            include_chain=self.include_chain + (target,),
            load=self.load,
        )
        return child.render(root)

    def _pretty(self, value: str, depth: int) -> str:
        if self.pretty:
            return "\n" + " " * (depth * self.indent) + value
        return value
