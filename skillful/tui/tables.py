from rich.markup import escape
from rich.table import Column, Table

from skillful.registry.diagnostics import RegistryDiagnostics
from skillful.search.models import RankedMatch
from skillful.skills.models import SkillDefinition, SkillResource
from skillful.tui.enums import UIStyle
from skillful.utils import compact_home_path


class SkillsTable:
    @staticmethod
    def listing_table(skills: list[SkillDefinition]) -> Table:
        table = Table(
            Column(header="Identifier", overflow="fold", max_width=40),
            Column(header="Name", width=24, overflow="ellipsis"),
            Column(header="Description", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for skill in skills:
            table.add_row(escape(skill.identifier), escape(skill.name), escape(skill.description))
        return table

    @staticmethod
    def ranked_table(ranks: list[RankedMatch]) -> Table:
        table = Table(
            Column(header="#", width=4, justify="right"),
            Column(header="Identifier", overflow="fold", max_width=40),
            Column(header="Score", width=6, justify="right"),
            Column(header="Description", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for position, rank in enumerate(ranks, start=1):
            table.add_row(
                str(position),
                escape(rank.skill.identifier),
                str(rank.total_score),
                escape(rank.skill.description),
            )
        return table

    @staticmethod
    def details_block(skill: SkillDefinition) -> Table:
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column(overflow="fold")
        table.add_row("Identifier", escape(skill.identifier))
        table.add_row("Name", escape(skill.name))
        table.add_row("Description", escape(skill.description))
        table.add_row("Path", escape(compact_home_path(skill.path)))
        if skill.license:
            table.add_row("License", escape(skill.license))
        if skill.allowed_tools:
            table.add_row("Allowed tools", escape(", ".join(skill.allowed_tools)))
        for key, value in skill.metadata.items():
            table.add_row(f"meta:{escape(str(key))}", escape(str(value)))
        return table


class ResourceTable:
    @staticmethod
    def resources_table(skill: SkillDefinition) -> Table:
        table = Table(
            Column(header="Kind", width=10),
            Column(header="Path", overflow="fold"),
            Column(header="Type", width=28, overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        groups: list[tuple[str, tuple[SkillResource, ...]]] = [
            ("script", skill.scripts),
            ("reference", skill.references),
            ("asset", skill.assets),
        ]
        for kind, resources in groups:
            for resource in resources:
                table.add_row(kind, escape(resource.relative_path), resource.mime_type or "")
        return table


class DiagnosticsTable:
    @staticmethod
    def summary_block(diagnostics: RegistryDiagnostics) -> Table:
        table = Table(show_header=False, box=None)
        for key, value in diagnostics.summary().items():
            style = UIStyle.RED.value if key in ("rejected", "duplicates") and value else ""
            rendered = f"[{style}]{value}[/{style}]" if style else str(value)
            table.add_row(f"[bold]{key}[/bold]", rendered)
        return table
