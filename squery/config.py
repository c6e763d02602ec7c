from pydantic import BaseModel, ConfigDict, field_validator


class BuilderConfig(BaseModel):
    """Settings shared by every statement a QueryBuilder produces."""

    model_config = ConfigDict(frozen=True)

    quote_char: str = "`"
    null_keyword: str = "NULL"
    always_true: str = "1"
    log_statements: bool = False

    @field_validator("quote_char")
    @classmethod
    def _check_quote_char(cls, value):
        # the same character opens and closes an identifier
        if value not in ("`", '"'):
            raise ValueError(f"quote_char must be '`' or '\"', got {value!r}")
        return value

    @field_validator("null_keyword", "always_true")
    @classmethod
    def _check_not_empty(cls, value):
        if not value.strip():
            raise ValueError("value must not be empty")
        return value
