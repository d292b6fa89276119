from enum import Enum


class Type(Enum):
    PLUS = "+"
    STAR = "*"
    LRB = "("
    RRB = ")"
    IDENTIFIER = "identifier"
    NUMBER = "number"
    EOF = "end of input"
    ERROR = "error"

    def to_type(type_str: str):
        return Type[type_str]

    def __str__(self) -> str:
        match self:
            case Type.IDENTIFIER | Type.NUMBER | Type.EOF | Type.ERROR:
                return self.value
        return repr(self.value)

    def article_str(self) -> str:
        match self:
            case Type.IDENTIFIER | Type.ERROR:
                return f"an {self}"
            case Type.EOF:
                return str(self)
            case _:
                return f"a {self}"

    @property
    def terminal(self) -> str:
        # How the terminal is written in a production
        match self:
            case Type.IDENTIFIER | Type.NUMBER:
                return self.name
        return self.value

    @property
    def leaf(self) -> str:
        # How the terminal is labelled in a parse tree
        match self:
            case Type.LRB:
                return "BOPEN"
            case Type.RRB:
                return "BCLOSE"
        return self.name
