import os
from typing import Optional, Tuple

try:
    import yaml  # type: ignore
except Exception as e:  # pragma: no cover
    raise RuntimeError(
        "PyYAML is required to run this converter. Please install it: pip install pyyaml"
    ) from e

from .emitter import Emitter
from .loader import base_dir_for, load_file, parse

PHP_PROLOGUE = "<?php\n"
EMPTY_PROGRAM = f"{PHP_PROLOGUE}return array();"


def to_program(literal: str) -> str:
    return f"{PHP_PROLOGUE}return {literal};"


def _convert(
    root: Optional[yaml.Node],
    base_dir: str,
    pretty: bool,
    indent: int,
    include_chain: Tuple[str, ...] = (),
) -> str:
    emitter = Emitter(base_dir, pretty=pretty, indent=indent, include_chain=include_chain)
    if root is None:
        return EMPTY_PROGRAM
    return to_program(emitter.render(root))


def from_file(path: str, pretty: bool = False, indent: int = 4) -> str:
    """
    Convert the YAML file at path into PHP source returning the equivalent array.

    `!include` paths anywhere in the tree, including inside included files, resolve against
    the directory of this file.
    """
    root = load_file(path)
    return _convert(root, base_dir_for(path), pretty, indent, (os.path.abspath(path),))


def from_string(text: str, pretty: bool = False, indent: int = 4, base_dir: Optional[str] = None) -> str:
    """
    Convert YAML text into PHP source returning the equivalent array.

    `!include` paths resolve against base_dir, or the current working directory when it is not given.
    """
    root = parse(text)
    return _convert(root, base_dir if base_dir is not None else os.getcwd(), pretty, indent)
