from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...application.ports.repositories import IdentifiedItemPort

RECORD_ACTION = "show"


class RecordUrlResolver:
    """Absolute public URL of an item's display page: ``<base>/items/show/<id>``."""

    def __init__(self, base_url: str, *, action: str = RECORD_ACTION) -> None:
        super().__init__()
        if not base_url.strip():
            raise ValueError("base_url must not be empty")
        self.base_url = base_url.strip().rstrip("/")
        self.action = action

    def __call__(self, item: IdentifiedItemPort) -> str:
        return f"{self.base_url}/items/{self.action}/{item.item_id}"
