from next_compat.tui.renderers import ReportConsoleUI

__all__ = ["ReportConsoleUI"]
