"""JSON encoding/decoding with a unified error taxonomy.

``JsonEncoder`` wraps the standard ``json`` module. Every failure reaches the
caller as :class:`InvalidArgumentError` carrying a :class:`JsonError` code, and
arbitrary object graphs are normalized by :meth:`JsonEncoder.process_data`
before serialization.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import re
import threading
import warnings
from collections.abc import Mapping
from enum import Enum
from types import SimpleNamespace
from typing import Any
from xml.etree.ElementTree import Element

from sidekit.config import CodecConfig
from sidekit.core.errors import InvalidArgumentError
from sidekit.core.types import EncodeOption, JsonError
from sidekit.encoder.serializable import JsonSerializable

logger = logging.getLogger(__name__)

# catch_warnings saves and restores the process-wide filter list.
_WARNINGS_LOCK = threading.Lock()

_SCALAR_TYPES = (str, int, float, bool, bytes, bytearray, type(None))

# Either an escape pair emitted by json.dumps or a character that may need escaping.
_ESCAPE_RE = re.compile(r"\\.|[/<>&'\N{LINE SEPARATOR}\N{PARAGRAPH SEPARATOR}]")

_HEX_ESCAPES: dict[str, tuple[EncodeOption, str]] = {
    "<": (EncodeOption.HEX_TAG, "\\u003C"),
    ">": (EncodeOption.HEX_TAG, "\\u003E"),
    "&": (EncodeOption.HEX_AMP, "\\u0026"),
    "'": (EncodeOption.HEX_APOS, "\\u0027"),
}

_LINE_TERMINATORS = {
    "\N{LINE SEPARATOR}": "\\u2028",
    "\N{PARAGRAPH SEPARATOR}": "\\u2029",
}


class JsonEncoder:
    """Encodes values to JSON and decodes JSON text back to Python values."""

    def __init__(self, config: CodecConfig | None = None):
        self._config = config or CodecConfig()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def encode(self, value: Any, options: int | None = None) -> str:
        """Encode *value* into a JSON string.

        *options* is a bitmask of :class:`EncodeOption` flags; ``None`` uses the
        configured default (unescaped slashes and unicode).

        Raises:
            InvalidArgumentError: if the value graph cannot be encoded.
        """
        if options is None:
            options = self._config.encode_options
        options = int(options)

        try:
            data = self.process_data(value)
        except RecursionError as exc:
            self.handle_json_error(JsonError.DEPTH, exc)

        pretty = bool(options & EncodeOption.PRETTY_PRINT)
        with _WARNINGS_LOCK, warnings.catch_warnings():
            warnings.simplefilter("error")
            try:
                json_text = json.dumps(
                    data,
                    ensure_ascii=not options & EncodeOption.UNESCAPED_UNICODE,
                    allow_nan=False,
                    indent=4 if pretty else None,
                    separators=(",", ": ") if pretty else (",", ":"),
                    default=_encode_fallback,
                )
            except Warning as exc:
                self.handle_json_error(JsonError.SYNTAX, exc)
            except (ValueError, TypeError, RecursionError) as exc:
                self.handle_json_error(_classify_encode_error(exc), exc)

        return _apply_escapes(json_text, options)

    def decode(self, json_text: Any, as_mapping: bool | None = None) -> Any:
        """Decode a JSON string into Python data.

        ``None`` and empty input decode to ``None``. With *as_mapping* (the
        default) JSON objects become ordered ``dict``s, otherwise
        ``SimpleNamespace`` records.

        Raises:
            InvalidArgumentError: if the input is not string-like or is not
                valid JSON.
        """
        if isinstance(json_text, (bool, Mapping, list, tuple, set, frozenset)):
            raise InvalidArgumentError("Invalid JSON data.", JsonError.UNKNOWN)
        if json_text is None or (
            isinstance(json_text, (str, bytes, bytearray)) and not json_text
        ):
            return None
        if as_mapping is None:
            as_mapping = self._config.as_mapping

        if isinstance(json_text, (bytes, bytearray)):
            try:
                text = bytes(json_text).decode("utf-8")
            except UnicodeDecodeError as exc:
                self.handle_json_error(JsonError.UTF8, exc)
        else:
            text = str(json_text)

        try:
            result = json.loads(
                text,
                object_hook=None if as_mapping else _to_record,
                parse_constant=_reject_constant,
            )
        except RecursionError as exc:
            self.handle_json_error(JsonError.DEPTH, exc)
        except ValueError as exc:
            self.handle_json_error(_classify_decode_error(exc), exc)

        if _nesting_depth(result) > self._config.max_depth:
            self.handle_json_error(JsonError.DEPTH)
        return result

    def html_encode(self, value: Any) -> str:
        """Encode *value* so the result can be embedded in HTML markup."""
        return self.encode(value, EncodeOption.HTML)

    # ------------------------------------------------------------------
    # Error handling
    # ------------------------------------------------------------------

    def handle_json_error(
        self, last_error: int | None, cause: BaseException | None = None
    ) -> None:
        """Raise :class:`InvalidArgumentError` for *last_error*.

        ``None`` means no fault and returns silently. Codes outside
        :class:`JsonError` are reported as an unknown error.
        """
        if last_error is None:
            return
        try:
            error = JsonError(last_error)
        except ValueError:
            error = JsonError.UNKNOWN

        logger.debug(f"JSON fault {error.name}: {cause!r}")
        exc = InvalidArgumentError(error.message, error)
        if cause is not None:
            raise exc from cause
        raise exc

    # ------------------------------------------------------------------
    # Pre-processing
    # ------------------------------------------------------------------

    def process_data(self, data: Any) -> Any:
        """Normalize *data* into plain dicts, lists and scalars.

        Objects are replaced by their JSON-ready form (``json_serialize()``),
        XML elements and dataclasses by mappings of their content, enums by
        their value, and any other object by a mapping of its public fields.
        The input graph is never mutated.
        """
        return self._process(data, 0, set())

    def _process(self, data: Any, depth: int, path: set[int]) -> Any:
        if isinstance(data, Enum):
            return data.value
        if isinstance(data, _SCALAR_TYPES):
            return data

        is_container = isinstance(data, (Mapping, list, tuple))
        if is_container:
            converted = data
        else:
            converted = _object_to_data(data)
            if converted is None:
                # No fields to enumerate; left for the serializer to reject.
                return data

        if id(data) in path:
            self.handle_json_error(JsonError.RECURSION)
        path.add(id(data))
        try:
            if not is_container:
                if isinstance(converted, (Mapping, list, tuple)) and not converted:
                    return {}
                return self._process(converted, depth, path)

            if depth >= self._config.max_depth:
                self.handle_json_error(JsonError.DEPTH)
            if isinstance(data, Mapping):
                return {
                    key: self._process(value, depth + 1, path)
                    for key, value in data.items()
                }
            return [self._process(item, depth + 1, path) for item in data]
        finally:
            path.discard(id(data))


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _object_to_data(obj: Any) -> Any:
    """Return the JSON-ready form of *obj*, or ``None`` if it has no fields."""
    if isinstance(obj, JsonSerializable) and not isinstance(obj, type):
        return obj.json_serialize()
    if isinstance(obj, Element):
        return _element_to_dict(obj)
    if isinstance(obj, SimpleNamespace):
        return dict(vars(obj))
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    return _public_fields(obj)


def _public_fields(obj: Any) -> dict[str, Any] | None:
    attrs = getattr(obj, "__dict__", None)
    if attrs is not None:
        return {name: value for name, value in attrs.items() if not name.startswith("_")}

    slot_names: list[str] = []
    for klass in reversed(type(obj).__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        slot_names.extend(slots)
    if not slot_names:
        return None
    return {
        name: getattr(obj, name)
        for name in slot_names
        if not name.startswith("_") and hasattr(obj, name)
    }


def _element_to_dict(element: Element) -> dict[str, Any]:
    """Convert an XML element into attributes, children and text."""
    result: dict[str, Any] = {}
    if element.attrib:
        result["@attributes"] = dict(element.attrib)

    repeated: set[str] = set()
    for child in element:
        if not child.attrib and len(child) == 0:
            value: Any = child.text if child.text else {}
        else:
            value = _element_to_dict(child)

        if child.tag not in result:
            result[child.tag] = value
        elif child.tag in repeated:
            result[child.tag].append(value)
        else:
            result[child.tag] = [result[child.tag], value]
            repeated.add(child.tag)

    if len(element) == 0 and element.text and element.text.strip():
        result["#text"] = element.text
    return result


def _encode_fallback(obj: Any) -> Any:
    if isinstance(obj, (bytes, bytearray)):
        return bytes(obj).decode("utf-8")
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _apply_escapes(json_text: str, options: int) -> str:
    def replace(match: re.Match[str]) -> str:
        token = match.group(0)
        if token == '\\"':
            return "\\u0022" if options & EncodeOption.HEX_QUOT else token
        if token.startswith("\\"):
            return token
        if token == "/":
            return token if options & EncodeOption.UNESCAPED_SLASHES else "\\/"
        if token in _LINE_TERMINATORS:
            return _LINE_TERMINATORS[token]
        flag, escaped = _HEX_ESCAPES[token]
        return escaped if options & flag else token

    return _ESCAPE_RE.sub(replace, json_text)


def _classify_encode_error(exc: BaseException) -> JsonError:
    if isinstance(exc, RecursionError):
        return JsonError.DEPTH
    if isinstance(exc, UnicodeDecodeError):
        return JsonError.UTF8
    if isinstance(exc, TypeError):
        return JsonError.UNSUPPORTED_TYPE
    if "Circular reference" in str(exc):
        return JsonError.RECURSION
    if "Out of range float values" in str(exc):
        return JsonError.INF_OR_NAN
    return JsonError.UNKNOWN


def _classify_decode_error(exc: ValueError) -> JsonError:
    if isinstance(exc, json.JSONDecodeError) and exc.msg.startswith("Invalid control character"):
        return JsonError.CTRL_CHAR
    return JsonError.SYNTAX


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _to_record(pairs: dict[str, Any]) -> SimpleNamespace:
    return SimpleNamespace(**pairs)


def _nesting_depth(value: Any) -> int:
    deepest = 0
    stack = [(value, 1)]
    while stack:
        node, level = stack.pop()
        if isinstance(node, SimpleNamespace):
            node = vars(node)
        if isinstance(node, dict):
            children = list(node.values())
        elif isinstance(node, list):
            children = node
        else:
            continue
        deepest = max(deepest, level)
        stack.extend((child, level + 1) for child in children)
    return deepest
