import pytest
from pydantic import ValidationError

from squery import BuilderConfig


def test_defaults():
    config = BuilderConfig()
    assert config.quote_char == "`"
    assert config.null_keyword == "NULL"
    assert config.always_true == "1"
    assert config.log_statements is False


@pytest.mark.parametrize("quote_char", ["", "``", "a", "1", "_", ".", "'", "*", " ", "[", "(", "{"])
def test_rejects_bad_quote_char(quote_char):
    with pytest.raises(ValidationError):
        BuilderConfig(quote_char=quote_char)


def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        BuilderConfig(null_keyword="  ")


def test_config_is_frozen():
    config = BuilderConfig()
    with pytest.raises(ValidationError):
        config.quote_char = '"'
