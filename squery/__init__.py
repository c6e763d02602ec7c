# sQuery - plain SQL statement strings for SELECT, INSERT, UPDATE and DELETE
from squery.builder import QueryBuilder, Scalar, backtick, alias, quote_value, select, insert, update, delete
from squery.config import BuilderConfig
from squery.identifiers import SegmentKind, classify_segment, is_column_reference

__version__ = "0.1.0"
__all__ = [
    "QueryBuilder", "BuilderConfig", "Scalar", "SegmentKind",
    "backtick", "alias", "quote_value", "select", "insert", "update", "delete",
    "classify_segment", "is_column_reference",
]
