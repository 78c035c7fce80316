"""Custom lint rules."""

from __future__ import annotations

from ..models import Rule
from .anchor_collision import AM022

# Registry of all available rules, in execution order
RULES: tuple[Rule, ...] = (AM022,)


def find_rule(name: str) -> Rule | None:
    """Look up a rule by identifier or alias, case-insensitively."""
    wanted = name.casefold()
    for rule in RULES:
        if any(rule_name.casefold() == wanted for rule_name in rule.names):
            return rule
    return None


__all__ = ["AM022", "RULES", "find_rule"]
