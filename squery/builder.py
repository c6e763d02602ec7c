import logging
from typing import Mapping, Optional, Sequence, Union

from squery.config import BuilderConfig
from squery import identifiers

Scalar = Union[str, int, float, bool, None]


class QueryBuilder:
    """
    Builds plain SQL statement strings.

    Table and column names are quoted, values are wrapped in single quotes
    without escaping and conditions are inserted verbatim. Nothing is executed.
    """

    logger = logging.getLogger("sQuery")
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    def __init__(self, config: Optional[BuilderConfig] = None, **options):
        if config is not None and options:
            raise ValueError("Pass either a BuilderConfig or keyword options, not both")
        self.config = config if config is not None else BuilderConfig(**options)

    def _log(self, sql):
        if self.config.log_statements:
            self.logger.info(f"[SQL BUILD]: {sql}")
        return sql

    def _condition(self, condition):
        if condition is None:
            return self.config.always_true
        return str(condition)

    def backtick(self, identifier: Optional[str]) -> Optional[str]:
        return identifiers.backtick(identifier, self.config.quote_char)

    def alias(self, expression: str) -> str:
        return identifiers.alias(expression, self.config.quote_char)

    def quote_value(self, value: Scalar) -> str:
        if value is None:
            return self.config.null_keyword
        if isinstance(value, bool):
            # true renders as 1, false as an empty string
            value = "1" if value else ""
        return f"'{value}'"

    def select(self, table: str, condition: Union[str, int, None] = None,
               columns: Union[str, Sequence[str]] = "*") -> str:
        if isinstance(columns, str):
            columns = [columns]
        cols = ", ".join(self.alias(c) for c in columns)
        sql = f"SELECT {cols} FROM {self.backtick(table)} WHERE {self._condition(condition)}"
        return self._log(sql)

    def insert(self, table: str, data: Mapping[str, Scalar]) -> str:
        cols = ", ".join(self.backtick(key) for key in data.keys())
        values = ", ".join(self.quote_value(value) for value in data.values())
        sql = f"INSERT INTO {self.backtick(table)} ({cols}) VALUES ({values})"
        return self._log(sql)

    def update(self, table: str, data: Mapping[str, Scalar],
               condition: Union[str, int, None] = None) -> str:
        fieldset = ", ".join(f"{self.backtick(key)} = {self.quote_value(value)}" for key, value in data.items())
        sql = f"UPDATE {self.backtick(table)} SET {fieldset} WHERE {self._condition(condition)}"
        return self._log(sql)

    def delete(self, table: str, condition: Union[str, int]) -> str:
        sql = f"DELETE FROM {self.backtick(table)} WHERE {condition}"
        return self._log(sql)


_default = QueryBuilder()

backtick = _default.backtick
alias = _default.alias
quote_value = _default.quote_value
select = _default.select
insert = _default.insert
update = _default.update
delete = _default.delete
