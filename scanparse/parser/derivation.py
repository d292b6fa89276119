from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from scanparse.parser.grammar import NonTerminal, Production
from scanparse.token import Token
from scanparse.type import Type


@dataclass(frozen=True)
class DerivationStep:
    production: Production
    # The identifier or number matched by `FACTOR -> IDENTIFIER | NUMBER`
    token: Optional[Token] = None

    @property
    def lhs(self) -> NonTerminal:
        return self.production.lhs

    @property
    def terminals(self) -> List[str]:
        """The text of the terminals this step derives, in order.

        Operators and brackets are spelled by their type, identifiers and numbers by the
        token that was matched.
        """
        return [
            self.text(symbol) for symbol in self.production.rhs if isinstance(symbol, Type)
        ]

    def text(self, terminal: Type) -> str:
        if terminal in (Type.IDENTIFIER, Type.NUMBER):
            return self.token.text
        return terminal.value

    def __str__(self) -> str:
        return str(self.production)


@dataclass
class Derivation:
    steps: List[DerivationStep] = field(default_factory=list)

    def append(self, production: Production, token: Optional[Token] = None) -> None:
        self.steps.append(DerivationStep(production, token))

    @property
    def terminals(self) -> List[str]:
        """The text of all terminals derived from the start symbol, in input order.

        The steps are in pre-order, so every non-terminal on the right hand side of a
        step is replaced by the terminals of the next unused step.
        """
        steps = iter(self.steps)
        first = next(steps, None)
        if first is None:
            return []
        return self._expand(first, steps)

    def _expand(
        self, step: DerivationStep, steps: Iterator[DerivationStep]
    ) -> List[str]:
        terminals = []
        for symbol in step.production.rhs:
            if isinstance(symbol, NonTerminal):
                terminals.extend(self._expand(next(steps), steps))
            else:
                terminals.append(step.text(symbol))
        return terminals

    def __iter__(self) -> Iterator[DerivationStep]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def __str__(self) -> str:
        return "\n".join(str(step) for step in self.steps)
