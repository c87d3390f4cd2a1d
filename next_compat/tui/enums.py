from enum import Enum

from next_compat.routes.models import RuleKind


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"
    WHITE = "white"


RULE_KIND_STYLE = {
    RuleKind.REWRITE: UIStyle.CYAN.value,
    RuleKind.REDIRECT: UIStyle.MAGENTA.value,
    RuleKind.HEADER: UIStyle.BLUE.value,
}
