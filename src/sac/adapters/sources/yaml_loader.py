"""YAML source loader for ``.sac.yaml`` files.

Contents:
    * :func:`load_source` - Read one file into a flat string mapping.
    * :func:`parse_nested` - Parse nested racks/bags text with the same rules.
    * :func:`flatten_document` - Convert a parsed YAML document to ``dict[str, str]``.

Scalars keep the exact text the user wrote (``0777``, ``1.10``, ``yes``);
only null (``~``, ``null`` or an empty value) is recognised and becomes
``""``. A missing file is not an error and yields ``{}``. Read failures
raise :class:`SourceReadError`; invalid YAML, a duplicated key or a
non-flat document raises :class:`SourceParseError`.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from sac.domain.errors import SourceParseError, SourceReadError

logger = logging.getLogger(__name__)

_NULL_TAG = "tag:yaml.org,2002:null"


class _LiteralLoader(yaml.SafeLoader):
    """SafeLoader resolving plain scalars to strings, except null.

    Rejects a key repeated within one mapping.

    Example:
        >>> yaml.load("sha: 0777\\nanswer: yes\\neditor:", Loader=_LiteralLoader)
        {'sha': '0777', 'answer': 'yes', 'editor': None}
    """

    yaml_implicit_resolvers = {
        first: [(tag, regexp) for tag, regexp in resolvers if tag == _NULL_TAG]
        for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
    }

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> dict[object, object]:
        seen: set[str] = set()
        for key_node, _ in node.value:
            if not isinstance(key_node, yaml.ScalarNode):
                continue
            if key_node.value in seen:
                raise yaml.constructor.ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    f"mapping key {key_node.value!r} already defined",
                    key_node.start_mark,
                )
            seen.add(key_node.value)
        return super().construct_mapping(node, deep=deep)


def _scalar_to_str(value: object) -> str:
    """Render a loaded scalar as a string; null becomes ``""``.

    Examples:
        >>> _scalar_to_str(None)
        ''
        >>> _scalar_to_str("0777")
        '0777'
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        # only reachable through an explicit ``!!bool`` tag
        return "true" if value else "false"
    return str(value)


def flatten_document(document: object, path: Path | None = None) -> dict[str, str]:
    """Convert a parsed YAML document into a flat string-to-string mapping.

    Args:
        document: Result of loading with the literal loader.
        path: Source path for error messages; ``None`` for in-memory text.

    Returns:
        Mapping with ``str`` keys and values. ``None`` keys and values become ``""``.

    Raises:
        SourceParseError: The document is not a mapping or holds nested values.

    Examples:
        >>> flatten_document({"name": "alice", "port": "8080", "editor": None})
        {'name': 'alice', 'port': '8080', 'editor': ''}
        >>> flatten_document(None)
        {}
    """
    where = str(path) if path is not None else "<nested>"
    if document is None:
        return {}
    if not isinstance(document, dict):
        raise SourceParseError(path, f"{where}: expected a mapping, got {type(document).__name__}")

    flat: dict[str, str] = {}
    for key, value in document.items():
        if isinstance(value, (dict, list)):
            raise SourceParseError(path, f"{where}: value for key '{key}' must be a scalar")
        flat[_scalar_to_str(key)] = _scalar_to_str(value)
    return flat


def _load_text(text: str) -> object:
    return yaml.load(text, Loader=_LiteralLoader)  # noqa: S506


def load_source(path: Path) -> dict[str, str]:
    """Load ``path`` as a flat string mapping.

    Args:
        path: Location of a ``.sac.yaml`` file.

    Returns:
        The parsed mapping, or ``{}`` when ``path`` does not exist.

    Raises:
        SourceReadError: The file could not be checked, read or decoded.
        SourceParseError: The content is not valid flat YAML.
    """
    try:
        if not path.exists():
            logger.debug("Configuration source not present", extra={"path": str(path)})
            return {}
        with path.open("r", encoding="utf-8") as handle:
            content = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(path, f"{path}: {exc}") from exc

    try:
        document = _load_text(content)
    except yaml.YAMLError as exc:
        raise SourceParseError(path, f"{path}: {exc}") from exc
    return flatten_document(document, path)


def parse_nested(text: str) -> dict[str, str]:
    """Parse nested key-value text stored under ``racks`` or ``bags``.

    Raises:
        SourceParseError: The text is not valid flat YAML.

    Example:
        >>> parse_nested("origin: https://example.invalid/repo")
        {'origin': 'https://example.invalid/repo'}
    """
    try:
        document = _load_text(text)
    except yaml.YAMLError as exc:
        raise SourceParseError(None, f"<nested>: {exc}") from exc
    return flatten_document(document)


__all__ = [
    "flatten_document",
    "load_source",
    "parse_nested",
]
