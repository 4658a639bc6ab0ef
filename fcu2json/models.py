"""Dataclasses for the FCU configuration and the CBUS event view."""

from dataclasses import dataclass, field
from enum import Enum
from typing import TypedDict

# FCU configuration file 'schema'


@dataclass(frozen=True)
class MergModule:
    """A module type definition (e.g. CANACC4). Informational only."""

    module_id: int
    module_name: str
    module_type: int
    module_events: int
    module_values: int
    num_nvs: int


@dataclass(frozen=True)
class UserEvent:
    """A CBUS event as configured by the user in FCU.

    ``owner_node`` and ``event_node`` are independent: an event may be
    raised by one node and consumed (owned) by another.
    """

    event_id: int
    owner_node: int
    node_name: str
    event_name: str
    values: str  # Often empty (<Values />)
    event_node: int
    event_value: int


@dataclass(frozen=True)
class UserNode:
    """A node on the CBUS network. Informational only."""

    module_id: int
    module_name: str
    node_num: int
    node_name: str
    num_events: int
    in_use: bool
    flim: bool
    node_vars: str  # Hex dump of node variables
    max_events: int
    version: str
    can_id: int
    max_nvs: int
    proc_id: str


@dataclass
class MergModuleDataSet:
    """Contents of one FCU XML file, in document order."""

    merg_modules: list[MergModule] = field(default_factory=list)
    user_events: list[UserEvent] = field(default_factory=list)
    user_nodes: list[UserNode] = field(default_factory=list)

    @classmethod
    def populate(cls, path: str) -> "MergModuleDataSet":
        """Loads a dataset from an FCU XML file.

        Raises:
            OpenFailedError: If the file cannot be opened.
            ParseFailedError: If the file is not a valid FCU document.
        """
        # loader imports this module
        from .loader import load

        return load(path)


# CBUS event 'schema'


class State(Enum):
    """State of a CBUS event, serialized by value."""

    UNKN = "UNKN"
    ZERO = "ZERO"  # ACOF
    ONE = "ONE"  # ACON


class CbusStateDict(TypedDict):
    """Dictionary representation of a CbusState."""

    name: str
    event: str
    state: str


class CBusInterfaceDict(TypedDict):
    """Dictionary representation of a CBusInterface."""

    cbusstates: list[CbusStateDict]


@dataclass
class CbusState:
    """Named state of a single CBUS event."""

    name: str
    event: str  # N<node>E<event>, e.g. "N2011E13"
    state: State = State.UNKN

    def to_dict(self) -> CbusStateDict:
        return {
            "name": self.name,
            "event": self.event,
            "state": self.state.value,
        }


@dataclass
class CBusInterface:
    """The event view: locally owned user events from an FCU configuration."""

    cbusstates: list[CbusState] = field(default_factory=list)

    @classmethod
    def from_dataset(cls, dataset: MergModuleDataSet) -> "CBusInterface":
        from .event_view import build

        return build(dataset)

    def to_dict(self) -> CBusInterfaceDict:
        return {"cbusstates": [s.to_dict() for s in self.cbusstates]}

    def pretty_print(self) -> str:
        from .event_view import render

        return render(self)
