from enum import Enum

from skillful.registry.readiness import ReadyState


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"


READY_STATE_STYLE = {
    ReadyState.UNINITIALIZED: UIStyle.DIM.value,
    ReadyState.BUILDING: UIStyle.YELLOW.value,
    ReadyState.READY: UIStyle.GREEN.value,
    ReadyState.FAILED: UIStyle.RED.value,
}
