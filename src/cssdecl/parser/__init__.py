from cssdecl.parser.declarations import (
    Declaration,
    Property,
    parse_declarations,
    split_declarations,
)

__all__ = ["Declaration", "Property", "parse_declarations", "split_declarations"]
