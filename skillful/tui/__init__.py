from skillful.tui.renderers import SkillConsoleUI

__all__ = ["SkillConsoleUI"]
