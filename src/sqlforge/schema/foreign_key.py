"""
Foreign key definitions
"""

from typing import Dict, List, Optional

from ..constants import FOREIGN_KEY_ACTIONS

import logging
logger = logging.getLogger(__name__)


class ForeignKey:
    """
    Owning columns, referenced table/columns and referential actions.

    Usage:
        table.foreign("user_id").references("users", "id").on_delete("cascade")
    """

    def __init__(self, columns: List[str]):
        self.columns = list(columns)
        self.reference_table: Optional[str] = None
        self.reference_columns: List[str] = []
        self.actions: Dict[str, str] = {}

    def get_columns(self) -> List[str]:
        return self.columns

    def get_reference_table(self) -> Optional[str]:
        return self.reference_table

    def get_reference_columns(self) -> List[str]:
        return self.reference_columns

    def get_actions(self) -> Dict[str, str]:
        """Actions keyed by "ON DELETE" / "ON UPDATE", in registration order."""
        return self.actions

    def references(self, table: str, *columns: str) -> "ForeignKey":
        self.reference_table = table
        self.reference_columns = list(columns)
        return self

    def on_delete(self, action: str) -> "ForeignKey":
        return self._add_action("ON DELETE", action)

    def on_update(self, action: str) -> "ForeignKey":
        return self._add_action("ON UPDATE", action)

    def _add_action(self, on: str, action: str) -> "ForeignKey":
        value = action.upper() if isinstance(action, str) else None
        if value not in FOREIGN_KEY_ACTIONS:
            logger.debug(f"Ignoring invalid {on} action: {action}")
            return self
        self.actions[on] = value
        return self
