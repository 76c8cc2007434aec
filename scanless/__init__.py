from scanless.keywords import KEYWORDS, is_keyword
from scanless.parser import (
    NoParseError,
    Parser,
    ParserLike,
    ParseResult,
    Success,
    Failure,
    option,
    and_,
    or_,
    zero_or_more,
    one_or_more,
    prefix,
    suffix,
    surround,
    map_,
    forward_decl,
    parse_literal,
    parse_literals,
    parse_tok_with_rule,
    parse_number,
    parse_identifier,
    end_of_input,
)

__all__ = [
    "KEYWORDS",
    "is_keyword",
    "NoParseError",
    "Parser",
    "ParserLike",
    "ParseResult",
    "Success",
    "Failure",
    "option",
    "and_",
    "or_",
    "zero_or_more",
    "one_or_more",
    "prefix",
    "suffix",
    "surround",
    "map_",
    "forward_decl",
    "parse_literal",
    "parse_literals",
    "parse_tok_with_rule",
    "parse_number",
    "parse_identifier",
    "end_of_input",
]
