"""CSV parsing, cell predicates, and the in-memory table store."""
from .loader import CSVExplorerError, LoadError, ParseError, parse_csv_text
from .normalize import is_missing, to_number
from .schemas import ColumnClassification, ColumnType, FilterSpec, SortSpec, Status, Table
