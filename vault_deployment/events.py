from typing import Any, Iterable, NamedTuple, Optional, Tuple


class Event(NamedTuple):
    """A decoded contract event: its name and positional arguments in ABI order."""

    name: str
    args: Tuple[Any, ...] = ()


class Receipt(NamedTuple):
    """A mined transaction and the events it emitted, in log order."""

    txn_hash: str
    block_number: int
    events: Tuple[Event, ...] = ()


def find_event(events: Iterable[Event], name: str) -> Optional[Event]:
    """Returns the first event called `name`, or None if the receipt has none."""
    return next((event for event in events if event.name == name), None)
