"""
Hint dataclass and global registry.

The registry is a plain dictionary populated by pmlogctl.hints at
import time. It holds static content only; which hints were already
shown is tracked per OutputManager, not here.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Set


@dataclass
class Hint:
    """A templatized hint that can be shown in specific contexts.

    Attributes:
        id: Dot-namespaced identifier (e.g., 'logkv.quoting')
        message: Template string with {var} placeholders for str.format()
        context: Contexts where this hint applies:
            'error'   - shown alongside error messages
            'result'  - shown after successful results
            'verbose' - shown only when verbosity >= min_level
        min_level: Minimum verbosity level for display
        category: Grouping key (usually the command name)
    """
    id: str
    message: str
    context: Set[str] = field(default_factory=lambda: {'verbose'})
    min_level: int = 1
    category: str = 'general'


_HINTS: Dict[str, Hint] = {}


def register_hint(hint: Hint) -> None:
    """Register a hint. Duplicate IDs overwrite."""
    _HINTS[hint.id] = hint


def register_hints(*hints: Hint) -> None:
    """Register multiple hints at once."""
    for h in hints:
        register_hint(h)


def get_hint(hint_id: str) -> Optional[Hint]:
    """Look up a hint by ID. Returns None if not found."""
    return _HINTS.get(hint_id)
