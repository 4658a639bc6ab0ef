"""Declarative mapping of FCU XML records onto the dataset models.

Each record type lists its fields as (attribute, XML leaf name, kind).
The loader binds every field eagerly through ``CONVERTERS[kind]``; any
``ValueError`` from a converter is reported as a parse failure for that
field.
"""

import re
from collections.abc import Callable
from typing import Any, NamedTuple

from .models import MergModule, UserEvent, UserNode

ROOT_TAG = "MergModuleDataSet"

U16_MAX = 0xFFFF

_UNSIGNED_RE = re.compile(r"[0-9]+")


def parse_u16(text: str) -> int:
    """Parse a decimal unsigned 16-bit value.

    Surrounding whitespace is allowed. Signs, separators and values
    above 65535 are rejected rather than wrapped.

    Raises:
        ValueError: If the text is not a decimal number in 0-65535.
    """
    stripped = text.strip()
    if not _UNSIGNED_RE.fullmatch(stripped):
        raise ValueError(f"not an unsigned integer: {text!r}")
    value = int(stripped)
    if value > U16_MAX:
        raise ValueError(f"out of range for u16: {value}")
    return value


def parse_bool(text: str) -> bool:
    """Parse an XML Schema boolean (true/false/1/0)."""
    stripped = text.strip()
    if stripped in ("true", "1"):
        return True
    if stripped in ("false", "0"):
        return False
    raise ValueError(f"not a boolean: {text!r}")


def parse_str(text: str) -> str:
    return text


CONVERTERS: dict[str, Callable[[str], Any]] = {
    "u16": parse_u16,
    "bool": parse_bool,
    "str": parse_str,
}


class FieldSpec(NamedTuple):
    attr: str
    xml_name: str
    kind: str


class RecordSpec(NamedTuple):
    tag: str
    model: type
    dataset_attr: str
    fields: tuple[FieldSpec, ...]


MERG_MODULE_FIELDS = (
    FieldSpec("module_id", "moduleId", "u16"),
    FieldSpec("module_name", "moduleName", "str"),
    FieldSpec("module_type", "moduleType", "u16"),
    FieldSpec("module_events", "moduleEvents", "u16"),
    FieldSpec("module_values", "moduleValues", "u16"),
    FieldSpec("num_nvs", "numNvs", "u16"),
)

USER_EVENT_FIELDS = (
    FieldSpec("event_id", "eventId", "u16"),
    FieldSpec("owner_node", "ownerNode", "u16"),
    FieldSpec("node_name", "nodeName", "str"),
    FieldSpec("event_name", "eventName", "str"),
    FieldSpec("values", "Values", "str"),
    FieldSpec("event_node", "eventNode", "u16"),
    FieldSpec("event_value", "eventValue", "u16"),
)

USER_NODE_FIELDS = (
    FieldSpec("module_id", "moduleId", "u16"),
    FieldSpec("module_name", "moduleName", "str"),
    FieldSpec("node_num", "nodeNum", "u16"),
    FieldSpec("node_name", "nodeName", "str"),
    FieldSpec("num_events", "numEvents", "u16"),
    FieldSpec("in_use", "inUse", "bool"),
    FieldSpec("flim", "Flim", "bool"),
    FieldSpec("node_vars", "NodeVars", "str"),
    FieldSpec("max_events", "maxEvents", "u16"),
    FieldSpec("version", "Version", "str"),
    FieldSpec("can_id", "CanId", "u16"),
    FieldSpec("max_nvs", "maxNVs", "u16"),
    FieldSpec("proc_id", "ProcId", "str"),
)

RECORDS: dict[str, RecordSpec] = {
    spec.tag: spec
    for spec in (
        RecordSpec("mergModules", MergModule, "merg_modules", MERG_MODULE_FIELDS),
        RecordSpec("userEvents", UserEvent, "user_events", USER_EVENT_FIELDS),
        RecordSpec("userNodes", UserNode, "user_nodes", USER_NODE_FIELDS),
    )
}
