# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from rich.align import Align
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from jobgen_lib.core.config import CFG
from jobgen_lib.properties.partition import PartitionProfile


class CollectorPresenter:
    """
    Creates the renderables shown to the operator while collecting a job specification.
    """

    @staticmethod
    def createBanner(title: str | None = None) -> Group:
        """
        Create a panel announcing the start of a session or of a section.

        Args:
            title (str | None): Text of the banner. Defaults to the configured title.

        Returns:
            Group: Rich Group containing the banner surrounded by empty lines.
        """
        panel = Panel(
            Align.center(
                Text(title or CFG.prompt.title, style=CFG.prompt.title_style)
            ),
            border_style=CFG.prompt.border_style,
            width=max(CFG.prompt.min_width, len(title or CFG.prompt.title) + 4),
            expand=False,
        )

        return Group(Text(""), panel, Text(""))

    @staticmethod
    def createPartitionsTable(partitions: list[str]) -> Group:
        """
        Create a table listing partitions with their 1-based indices.

        Args:
            partitions (list[str]): Names of the partitions in the order of selection.

        Returns:
            Group: Rich Group containing the title and the table.
        """
        table = Table(show_header=True, box=None, padding=(0, 1))
        table.add_column(
            header=Text("#", justify="right", style=CFG.prompt.headers_style),
            justify="right",
        )
        table.add_column(
            header=Text("Partition", justify="left", style=CFG.prompt.headers_style),
            justify="left",
        )

        for i, name in enumerate(partitions, start=1):
            table.add_row(Text(str(i)), Text(name))

        return Group(
            Text("Available partitions:", style=CFG.prompt.title_style),
            table,
            Text(""),
        )

    @staticmethod
    def createProfileTable(profile: PartitionProfile) -> Group:
        """
        Create a table summarizing the limits of a partition.

        Args:
            profile (PartitionProfile): The limits to present.

        Returns:
            Group: Rich Group containing the title and the table.
        """
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column(justify="left", style=CFG.prompt.headers_style)
        table.add_column(justify="left")

        table.add_row("  - Maximum nodes:", str(profile.max_nodes))
        table.add_row("  - CPUs per node:", str(profile.cpus_per_node))
        table.add_row("  - Memory per node:", f"{profile.mem_per_node_mb} MB")
        table.add_row("  - Time limit:", profile.default_time_limit)

        return Group(
            Text(
                f"Resources of partition '{profile.name}':",
                style=CFG.prompt.title_style,
            ),
            table,
            Text(""),
        )

    @staticmethod
    def createCatalogHint(label: str, items: list[str], separator: str = ",") -> Text:
        """
        Create a hint listing items advertised by the resource catalog.

        Args:
            label (str): Description of the items (e.g. 'Available constraints').
            items (list[str]): The advertised items.
            separator (str): String used to join the items.

        Returns:
            Text: The formatted hint.
        """
        return Text(f"{label}: ", style=CFG.prompt.headers_style) + Text(
            separator.join(items), style=CFG.prompt.secondary_style
        )
