"""Items loaded from an archive's CSV export.

Element columns are headed ``<Set Name>:<Field Name>``, for example
``Dublin Core:Title`` or ``Item Type Metadata:State``. A cell may hold several
values joined by the configured delimiter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...constants import Defaults
from ...domain.entities.item import FileRecord, ItemRecord, TextValue
from ..io.csv_reader import CSVReader

if TYPE_CHECKING:
    from pathlib import Path

    import pandas as pd

ELEMENT_COLUMN_SEPARATOR = ":"


class CSVItemRepository:
    pass

    def __init__(
        self,
        reader: CSVReader | None = None,
        *,
        value_delimiter: str = Defaults.VALUE_DELIMITER,
        id_column: str = Defaults.ID_COLUMN,
        files_column: str = Defaults.FILES_COLUMN,
        files_base_url: str = "",
    ) -> None:
        super().__init__()
        self._reader = reader or CSVReader()
        self.value_delimiter = value_delimiter
        self.id_column = id_column
        self.files_column = files_column
        self.files_base_url = files_base_url

    def load_items(self, source: Path) -> list[ItemRecord]:
        frame = self._reader.read(source)
        return self.items_from_frame(frame)

    def items_from_frame(self, frame: pd.DataFrame) -> list[ItemRecord]:
        element_columns = {
            column: key
            for column in frame.columns
            if (key := parse_element_column(str(column))) is not None
        }
        items: list[ItemRecord] = []
        for position, row in enumerate(frame.to_dict(orient="records"), start=1):
            item_id = _cell(row.get(self.id_column)).strip() or str(position)
            element_texts = {
                key: [TextValue(text=value) for value in values]
                for column, key in element_columns.items()
                if (values := self.split_values(_cell(row.get(column))))
            }
            files = [
                FileRecord(filename=name, base_url=self.files_base_url)
                for name in self.split_values(_cell(row.get(self.files_column)))
            ]
            items.append(
                ItemRecord(item_id=item_id, element_texts=element_texts, files=files)
            )
        return items

    def split_values(self, cell: str) -> list[str]:
        return [
            value.strip()
            for value in cell.split(self.value_delimiter)
            if value.strip()
        ]


def parse_element_column(column: str) -> tuple[str, str] | None:
    set_name, separator, field_name = column.partition(ELEMENT_COLUMN_SEPARATOR)
    if not separator or not set_name.strip() or not field_name.strip():
        return None
    return set_name.strip(), field_name.strip()


def _cell(value: object) -> str:
    if value is None:
        return ""
    return str(value)
