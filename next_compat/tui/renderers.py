from rich.console import Console
from rich.markup import escape

from next_compat.constants import DEFAULT_DIST_DIRNAME
from next_compat.models import CompatibilityReport
from next_compat.tui.enums import UIStyle
from next_compat.tui.sections import UISection
from next_compat.tui.tables import FlagsTable, PathTable, ReportTable
from next_compat.utils import compact_home_path


class ReportConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_report(
        self,
        report: CompatibilityReport,
        project: str,
        dist_dir: str = DEFAULT_DIST_DIRNAME,
        verbose: bool = False,
    ) -> None:
        routes = report.routes
        self.console.print(
            UISection.wrap(
                "compatibility overview",
                ReportTable.summary_block(routes, project=compact_home_path(project)),
                style=UIStyle.BLUE.value,
                subtitle=escape(f"dist: {dist_dir}"),
            )
        )

        config = routes.firebase_config()
        if config:
            self.console.print(
                UISection.wrap(
                    "firebase hosting",
                    ReportTable.firebase_table(config),
                    style=UIStyle.GREEN.value,
                )
            )

        verdicts = routes.verdicts if verbose else routes.unsupported
        if verdicts:
            self.console.print(
                UISection.wrap(
                    "rules" if verbose else "unsupported rules",
                    ReportTable.verdicts_table(verdicts, verbose=verbose),
                    style=UIStyle.YELLOW.value,
                )
            )
        else:
            self.console.print(
                UISection.note(
                    "unsupported rules",
                    "All rules can be expressed by Firebase Hosting.",
                    style=UIStyle.GREEN.value,
                )
            )

        self.console.print(
            UISection.wrap(
                "build flags",
                FlagsTable.flags_table(report.flags),
                style=UIStyle.CYAN.value,
            )
        )

    def render_paths(self, rows: list[tuple[str, bool, str]]) -> None:
        self.console.print(
            UISection.wrap(
                "path patterns", PathTable.paths_table(rows), style=UIStyle.BLUE.value
            )
        )
