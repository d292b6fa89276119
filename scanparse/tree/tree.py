from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from scanparse.parser.derivation import Derivation, DerivationStep
from scanparse.parser.grammar import NonTerminal
from scanparse.type import Type

EPSILON_LEAF = "EPSILON"


@dataclass
class Node:
    label: str
    children: List[Node] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @classmethod
    def from_derivation(cls, derivation: Derivation) -> Optional[Node]:
        """Rebuild the parse tree of a line from its derivation.

        The steps of a derivation are in pre-order, so every non-terminal on the right
        hand side of a step is expanded by the next unused step.

        Returns:
            Optional[Node]: The root EXPR node, or None for an empty derivation.
        """
        steps = iter(derivation)
        first = next(steps, None)
        if first is None:
            return None
        return cls._expand(first, steps)

    @classmethod
    def _expand(cls, step: DerivationStep, steps: Iterator[DerivationStep]) -> Node:
        children = []
        for symbol in step.production.rhs:
            if isinstance(symbol, NonTerminal):
                children.append(cls._expand(next(steps), steps))
            elif symbol in (Type.IDENTIFIER, Type.NUMBER):
                children.append(cls(f"{symbol.leaf}({step.token.text})"))
            else:
                children.append(cls(symbol.leaf))

        if not children:
            children.append(cls(EPSILON_LEAF))
        return cls(step.lhs.name, children)
