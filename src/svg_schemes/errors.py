"""Errors raised while decoding colors and reading scheme documents."""


class SchemeError(ValueError):
    """Base class for every scheme decoding failure."""


class DocumentMalformed(SchemeError):
    """The document is not well-formed XML."""


class MalformedVersion(SchemeError):
    """The <version> element holds something other than an integer."""


class PropertyNotFound(SchemeError):
    def __init__(self, slot: int) -> None:
        super().__init__(f"unable to find 'fill' property on #c{slot}")
        self.slot = slot


class PropertyMalformed(SchemeError):
    def __init__(self, fragment: str) -> None:
        super().__init__(f"malformed property for {fragment!r}")
        self.fragment = fragment


class MalformedLiteral(SchemeError):
    def __init__(self, literal: str, reason: str) -> None:
        super().__init__(f"malformed color literal {literal!r}: {reason}")
        self.literal = literal
