from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import pandas as pd

from .exceptions import DataParseError, DataSourceNotFoundError

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(slots=True)
class CSVReadOptions:
    normalize_headers: bool = True
    dtype: Any = str
    encoding: str = "utf-8"


class CSVReader:
    pass

    def read(self, path: Path, options: CSVReadOptions | None = None) -> pd.DataFrame:
        if options is None:
            options = CSVReadOptions()
        if not path.exists():
            raise DataSourceNotFoundError(path)
        if not path.is_file():
            raise DataSourceNotFoundError(path, "Not a file")
        try:
            df = pd.read_csv(
                path,
                dtype=options.dtype,
                keep_default_na=False,
                na_filter=False,
                encoding=options.encoding,
            )
        except FileNotFoundError as e:
            raise DataSourceNotFoundError(path) from e
        except pd.errors.ParserError as e:
            raise DataParseError(path, "Failed to parse CSV", str(e)) from e
        except pd.errors.EmptyDataError as e:
            raise DataParseError(path, "CSV file is empty") from e
        except UnicodeDecodeError as e:
            raise DataParseError(
                path, "Encoding error, try a different encoding", str(e)
            ) from e
        except Exception as e:
            raise DataParseError(path, "Unexpected error reading", str(e)) from e
        if df.shape[1] == 0:
            raise DataParseError(path, "CSV file has no columns")
        if options.normalize_headers:
            df = self._normalize_headers(df)
        return df

    def _normalize_headers(self, df: pd.DataFrame) -> pd.DataFrame:
        df.columns = [str(col).strip() for col in df.columns]
        return df
