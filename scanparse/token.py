from __future__ import annotations

from dataclasses import dataclass, field

from scanparse.type import Type
from scanparse.util import Span


@dataclass(frozen=True)
class Token:
    text: str
    type: Type = field(repr=False)
    span: Span = field(repr=False, default_factory=Span.default)

    def match(self, other_type: Type) -> bool:
        return self.type == other_type

    def __eq__(self, __o: object) -> bool:
        if not isinstance(__o, Token):
            return False
        return self.text == __o.text and self.type == __o.type

    def __hash__(self) -> int:
        return hash(self.text)

    def __str__(self) -> str:
        if self.type == Type.EOF:
            return str(self.type)
        return repr(self.text)
