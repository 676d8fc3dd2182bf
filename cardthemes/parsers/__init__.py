from cardthemes.parsers.pysol_config import (
    parse_cardset,
    parse_config_text,
    parse_int,
    try_parse_cardset,
)

__all__ = [
    "parse_cardset",
    "parse_config_text",
    "parse_int",
    "try_parse_cardset",
]
