"""Projection of an FCU dataset onto named CBUS event states.

Only events owned by the node that raises them (``ownerNode == eventNode``)
are locally controllable, so only those end up in the view.
"""

import json

import structlog

from .models import CBusInterface, CbusState, MergModuleDataSet, State, UserEvent

logger = structlog.get_logger(__name__)


def is_local_event(event: UserEvent) -> bool:
    """Check if an event is owned by the node that raises it.

    Args:
        event: The user event to check.

    Returns:
        True if owner and event node are the same.
    """
    return event.owner_node == event.event_node


def event_string(event: UserEvent) -> str:
    """Format the long event identifier, e.g. ``N2011E13``."""
    return f"N{event.event_node}E{event.event_value}"


def build(dataset: MergModuleDataSet) -> CBusInterface:
    """Builds the event view from a loaded dataset.

    Events keep their document order; duplicates are kept. The dataset
    is not modified.

    Args:
        dataset: The loaded FCU configuration.

    Returns:
        A CBusInterface holding one UNKN state per local event (possibly none).
    """
    cbusstates = [
        CbusState(name=event.event_name, event=event_string(event), state=State.UNKN)
        for event in dataset.user_events
        if is_local_event(event)
    ]
    logger.debug(
        "event_view_built",
        user_events=len(dataset.user_events),
        included=len(cbusstates),
        excluded=len(dataset.user_events) - len(cbusstates),
    )
    return CBusInterface(cbusstates=cbusstates)


def render(view: CBusInterface) -> str:
    """Serializes the event view as indented JSON."""
    return json.dumps(view.to_dict(), indent=2, ensure_ascii=False)
