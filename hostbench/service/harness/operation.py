from typing import Any, Callable, NamedTuple


class Operation(NamedTuple):
    """A labelled zero-argument action. Plain (label, action) tuples are accepted too."""
    label: str
    action: Callable[[], Any]
