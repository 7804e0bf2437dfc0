from pathlib import Path
from typing import Sequence

from rich.console import Console, Group
from rich.markdown import Markdown
from rich.markup import escape
from rich.text import Text

from skillful.registry.diagnostics import RegistryDiagnostics
from skillful.registry.readiness import ReadyState
from skillful.resources import ResolvedResource
from skillful.search.models import SearchResult
from skillful.skills.models import SkillDefinition
from skillful.tui.enums import READY_STATE_STYLE, UIStyle
from skillful.tui.sections import UISection
from skillful.tui.tables import DiagnosticsTable, ResourceTable, SkillsTable
from skillful.utils import compact_home_path


class SkillConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_listing(self, skills: list[SkillDefinition]) -> None:
        if not skills:
            self.console.print(
                UISection.note("skills", "No skills found.", style=UIStyle.DIM.value)
            )
            return
        self.console.print(
            UISection.wrap(
                "skills",
                SkillsTable.listing_table(skills),
                style=UIStyle.BLUE.value,
                subtitle=f"{len(skills)} total",
            )
        )

    def render_search(
        self, result: SearchResult, diagnostics: RegistryDiagnostics | None = None
    ) -> None:
        if result.ranks:
            body = SkillsTable.ranked_table(result.ranks)
        elif result.matches:
            body = SkillsTable.listing_table(result.matches)
        else:
            body = Text("No matching skills.", style=UIStyle.DIM.value)

        self.console.print(
            UISection.wrap(
                "search results",
                body,
                style=UIStyle.CYAN.value,
                subtitle=f"{result.total_matches} of {result.total_in_index}",
            )
        )
        style = UIStyle.GREEN.value if result.total_matches else UIStyle.YELLOW.value
        self.console.print(UISection.note("feedback", escape(result.feedback), style=style))

        if diagnostics is not None:
            self.render_diagnostics(diagnostics)

    def render_skill(self, skill: SkillDefinition) -> None:
        parts = [SkillsTable.details_block(skill)]
        if skill.scripts or skill.references or skill.assets:
            parts.append(ResourceTable.resources_table(skill))
        self.console.print(
            UISection.wrap(escape(skill.identifier), Group(*parts), style=UIStyle.BLUE.value)
        )
        self.console.print(
            UISection.wrap("content", Markdown(skill.content), style=UIStyle.DIM.value)
        )

    def render_not_found(self, identifiers: Sequence[str]) -> None:
        self.console.print(UISection.bullets("not found", identifiers, style=UIStyle.RED.value))

    def render_resource(self, resource: ResolvedResource) -> None:
        subtitle = f"{resource.kind.value} · {resource.mime_type}"
        self.console.print(
            UISection.wrap(
                escape(compact_home_path(resource.absolute_path)),
                Text(resource.content),
                style=UIStyle.MAGENTA.value,
                subtitle=subtitle,
            )
        )

    def render_diagnostics(
        self,
        diagnostics: RegistryDiagnostics,
        roots: Sequence[Path] = (),
        state: ReadyState | None = None,
    ) -> None:
        if roots:
            roots_text = "\n".join(
                f"{position}. {escape(compact_home_path(root))}"
                + ("" if root.is_dir() else " [dim](missing)[/dim]")
                for position, root in enumerate(roots, start=1)
            )
            self.console.print(UISection.note("roots (ascending priority)", roots_text, style=UIStyle.BLUE.value))

        subtitle = None
        if state is not None:
            state_style = READY_STATE_STYLE[state]
            subtitle = f"[{state_style}]{state.value}[/{state_style}]"
        border = UIStyle.RED.value if diagnostics.has_problems() else UIStyle.GREEN.value
        self.console.print(
            UISection.wrap(
                "diagnostics",
                DiagnosticsTable.summary_block(diagnostics),
                style=border,
                subtitle=subtitle,
            )
        )

        if diagnostics.errors:
            self.console.print(
                UISection.bullets("errors", diagnostics.errors, style=UIStyle.RED.value)
            )
