"""
Query-string option encoding shared by every OSRM service.

Each request type declares its options as a tuple of OptionField entries;
build_options() walks that table and produces the ordered (name, value)
pairs sent as query parameters.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

from .common import format_decimal


class OptionKind(str, Enum):
    """How a configured value is turned into a query parameter."""
    # Sent only when configured
    SCALAR = "scalar"
    # Always sent as "true"/"false"
    FLAG = "flag"
    # Sent only when configured, elements joined with ";"
    LIST = "list"


@dataclass(frozen=True)
class OptionField:
    """One query parameter, read from the request attribute of the same name."""
    name: str
    kind: OptionKind = OptionKind.SCALAR


def to_wire(value: Any) -> str:
    """Textual wire form of a single option value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return value.value
    if hasattr(value, "to_wire"):
        return value.to_wire()
    if isinstance(value, float):
        return format_decimal(value)
    return str(value)


def build_options(config: Any, fields: Iterable[OptionField]) -> list[tuple[str, str]]:
    """
    Build the ordered query parameters for a request configuration.

    Never fails and never validates: out-of-range values and list lengths that
    do not match the coordinate count are left for the service to reject.
    """
    options: list[tuple[str, str]] = []
    for field in fields:
        value = getattr(config, field.name)
        if field.kind is OptionKind.FLAG:
            options.append((field.name, to_wire(bool(value))))
        elif value is None:
            continue
        elif field.kind is OptionKind.LIST:
            options.append((field.name, ";".join(to_wire(item) for item in value)))
        else:
            options.append((field.name, to_wire(value)))
    return options


GENERAL_OPTIONS: tuple[OptionField, ...] = (
    OptionField("bearings", OptionKind.LIST),
    OptionField("radiuses", OptionKind.LIST),
    OptionField("generate_hints", OptionKind.FLAG),
    OptionField("hints", OptionKind.LIST),
    OptionField("approaches", OptionKind.LIST),
    OptionField("exclude", OptionKind.LIST),
    OptionField("snapping"),
    OptionField("skip_waypoints", OptionKind.FLAG),
)
