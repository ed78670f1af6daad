from .models import NO_FACTION, Item, Participant, Report
from .fields import extract_attacker, extract_item, extract_victim, find_line
from .parser import (
    KillmailParseError,
    find_markers,
    parse_killmail,
    resolve_sections,
    split_paragraphs,
)
from .printer import StandardPrinter, render_killmail
from .rewriters import REWRITERS, fix_factional_warfare_alliances, rewrite_killmail

__all__ = [
    "NO_FACTION",
    "Item",
    "Participant",
    "Report",
    "extract_attacker",
    "extract_item",
    "extract_victim",
    "find_line",
    "KillmailParseError",
    "find_markers",
    "parse_killmail",
    "resolve_sections",
    "split_paragraphs",
    "StandardPrinter",
    "render_killmail",
    "REWRITERS",
    "fix_factional_warfare_alliances",
    "rewrite_killmail",
]
