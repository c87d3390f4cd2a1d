from typing import Any

from rich.markup import escape
from rich.table import Column, Table

from next_compat.models import BuildFlags, RoutesReport, RuleVerdict
from next_compat.tui.enums import RULE_KIND_STYLE, UIStyle


class ReportTable:
    @staticmethod
    def summary_block(report: RoutesReport, project: str):
        counts = report.summary()
        chips = [
            f"{key}={counts[key]}"
            for key in ("rewrite", "redirect", "header")
            if counts[key] > 0
        ]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Project", project)
        table.add_row("Rules", str(counts["rules"]))
        table.add_row("Supported", "  ".join(chips))
        table.add_row("Unsupported", str(counts["unsupported"]))
        return table

    @staticmethod
    def verdicts_table(verdicts: list[RuleVerdict], verbose: bool = False) -> Table:
        columns = [
            Column(header="Kind", width=10),
            Column(header="Status", width=12),
            Column(header="Source", overflow="ellipsis"),
        ]
        if verbose:
            columns.append(Column(header="Reason", overflow="ellipsis"))
        table = Table(*columns, expand=True, header_style="bold")

        for verdict in verdicts:
            kind_style = RULE_KIND_STYLE.get(verdict.kind, UIStyle.WHITE.value)
            status_style = UIStyle.GREEN.value if verdict.supported else UIStyle.RED.value
            status = "supported" if verdict.supported else "unsupported"
            row = [
                f"[{kind_style}]{verdict.kind.value}[/{kind_style}]",
                f"[{status_style}]{status}[/{status_style}]",
                escape(verdict.source),
            ]
            if verbose:
                row.append(escape(verdict.reason))
            table.add_row(*row)
        return table

    @staticmethod
    def firebase_table(config: dict[str, Any]) -> Table:
        table = Table(
            Column(header="Section", width=10),
            Column(header="Source", overflow="ellipsis"),
            Column(header="Target", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for section, entries in config.items():
            for entry in entries:
                if "headers" in entry:
                    target = ", ".join(item["key"] for item in entry["headers"])
                elif "type" in entry:
                    target = f"{entry['destination']} ({entry['type']})"
                else:
                    target = entry["destination"]
                table.add_row(section, escape(entry["source"]), escape(target))
        return table


class FlagsTable:
    @staticmethod
    def flags_table(flags: BuildFlags) -> Table:
        table = Table(show_header=False, box=None)
        for key, value in flags.as_dict().items():
            style = UIStyle.GREEN.value if value else UIStyle.DIM.value
            table.add_row(f"[bold]{key}[/bold]", f"[{style}]{str(value).lower()}[/{style}]")
        return table


class PathTable:
    @staticmethod
    def paths_table(rows: list[tuple[str, bool, str]]) -> Table:
        table = Table(
            Column(header="Pattern", overflow="fold"),
            Column(header="Regex", width=8),
            Column(header="Cleaned", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for pattern, has_regex, cleaned in rows:
            style = UIStyle.RED.value if has_regex else UIStyle.GREEN.value
            table.add_row(
                escape(pattern),
                f"[{style}]{str(has_regex).lower()}[/{style}]",
                escape(cleaned),
            )
        return table
