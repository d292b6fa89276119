from __future__ import annotations

import os
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Set, Tuple

from scanparse.error.error import GrammarException
from scanparse.type import Type
from scanparse.util import open_file

GRAMMAR_FILE = os.path.join(os.path.dirname(__file__), "grammar.txt")

EPSILON = "ε"

TERMINAL_MAPPING = {
    "+": Type.PLUS,
    "*": Type.STAR,
    "(": Type.LRB,
    ")": Type.RRB,
    "IDENTIFIER": Type.IDENTIFIER,
    "NUMBER": Type.NUMBER,
}


class NonTerminal(Enum):
    EXPR = "an expression"
    EXPRDASH = "the remainder of a sum"
    TERM = "a term"
    TERMDASH = "the remainder of a product"
    FACTOR = "a factor"

    def article_str(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.name


Symbol = NonTerminal | Type


@dataclass(frozen=True)
class Production:
    lhs: NonTerminal
    rhs: Tuple[Symbol, ...]

    @property
    def is_epsilon(self) -> bool:
        return not self.rhs

    def __str__(self) -> str:
        symbols = [
            symbol.terminal if isinstance(symbol, Type) else str(symbol)
            for symbol in self.rhs
        ]
        return f"{self.lhs} -> {' '.join(symbols) or EPSILON}"


class Grammar:
    def __init__(
        self,
        grammar_str: str = "",
        grammar_file: str = "",
        terminal_mapping: Dict[str, Type] = TERMINAL_MAPPING,
        start_non_terminal: NonTerminal = NonTerminal.EXPR,
    ) -> None:
        """
        Args:
            grammar_str (str): String depicting a Grammar file, mutually exclusive with
                `grammar_file`.
            grammar_file (str): Filename pointing to a Grammar file, mutually exclusive with
                `grammar_str`.
            terminal_mapping (Dict[str, Type]): Mapping of quoted terminals to token types.
            start_non_terminal (NonTerminal): Non-terminal denoting the start of the grammar.

        Raises:
            GrammarException: If the grammar cannot be read, or is not LL(1).
        """
        if grammar_file:
            grammar_str = open_file(os.path.abspath(grammar_file))
        if not grammar_str or not grammar_str.strip():
            raise GrammarException("Must provide either grammar_str or grammar_file.")

        self.terminal_mapping = terminal_mapping
        self.start_non_terminal = start_non_terminal
        self.productions = self._parse_productions(grammar_str)
        if start_non_terminal not in self.non_terminals:
            raise GrammarException(
                f"Start non-terminal {start_non_terminal} has no productions."
            )
        for production in self.productions:
            for symbol in production.rhs:
                if isinstance(symbol, NonTerminal) and symbol not in self.non_terminals:
                    raise GrammarException(
                        f"Non-terminal {symbol} is used in {production}, "
                        "but has no productions."
                    )

        self.nullable, self.first = self._first_sets()
        self.table, self.fallback = self._predict_table()

    @property
    def non_terminals(self) -> List[NonTerminal]:
        return list(dict.fromkeys(production.lhs for production in self.productions))

    def alternatives(self, nt: NonTerminal) -> List[Production]:
        return [production for production in self.productions if production.lhs == nt]

    def predict(self, nt: NonTerminal, lookahead: Type) -> Optional[Production]:
        """Select the production to expand `nt` with, given the lookahead.

        The production whose FIRST set holds the lookahead is chosen. Otherwise the
        empty alternative, or the only production of `nt`, is used. None is returned
        when neither exists, e.g. for a FACTOR that starts with a '+'.
        """
        return self.table[nt].get(lookahead, self.fallback.get(nt))

    def expected(self, nt: NonTerminal) -> List[Type]:
        # Token types that select a non-empty production of `nt`, in grammar order
        return list(self.table[nt])

    def _parse_productions(self, grammar_str: str) -> List[Production]:
        # Remove comments, and match Non Terminals as the left hand side of '::='
        grammar_str = re.sub(r"#.*", "", grammar_str)
        pattern = re.compile(r"(?P<non_terminal>\w+)\s*::=")
        matches = list(pattern.finditer(grammar_str))
        if not matches or grammar_str[: matches[0].start()].strip():
            raise GrammarException("Grammar must start with a 'NonTerminal ::=' rule.")

        productions = []
        for match, next_match in zip(matches, matches[1:] + [None]):
            end = next_match.start() if next_match else len(grammar_str)
            lhs = self._non_terminal(match["non_terminal"])
            for alternative in grammar_str[match.end() : end].split("|"):
                rhs = tuple(
                    self._symbol(symbol)
                    for symbol in alternative.split()
                    if symbol != EPSILON
                )
                if not rhs and EPSILON not in alternative:
                    raise GrammarException(
                        f"Empty alternative for {lhs}, use {EPSILON!r} instead."
                    )
                productions.append(Production(lhs, rhs))
        return productions

    def _symbol(self, symbol: str) -> Symbol:
        if len(symbol) > 2 and symbol[0] == symbol[-1] == "'":
            try:
                return self.terminal_mapping[symbol[1:-1]]
            except KeyError:
                raise GrammarException(f"Unknown terminal {symbol}.") from None
        return self._non_terminal(symbol)

    @staticmethod
    def _non_terminal(name: str) -> NonTerminal:
        try:
            return NonTerminal[name]
        except KeyError:
            raise GrammarException(f"Unknown non-terminal {name!r}.") from None

    def _first_of(
        self,
        symbols: Tuple[Symbol, ...],
        nullable: Set[NonTerminal],
        first: Dict[NonTerminal, Set[Type]],
    ) -> Tuple[Set[Type], bool]:
        # FIRST set of a sequence of symbols, and whether the sequence can derive ε
        result = set()
        for symbol in symbols:
            if isinstance(symbol, Type):
                result.add(symbol)
                return result, False
            result |= first[symbol]
            if symbol not in nullable:
                return result, False
        return result, True

    def _first_sets(
        self,
    ) -> Tuple[FrozenSet[NonTerminal], Dict[NonTerminal, FrozenSet[Type]]]:
        nullable: Set[NonTerminal] = set()
        first: Dict[NonTerminal, Set[Type]] = {nt: set() for nt in NonTerminal}

        # Iterate until a fixed point is reached
        changed = True
        while changed:
            changed = False
            for production in self.productions:
                symbols, is_nullable = self._first_of(production.rhs, nullable, first)
                if not symbols <= first[production.lhs]:
                    first[production.lhs] |= symbols
                    changed = True
                if is_nullable and production.lhs not in nullable:
                    nullable.add(production.lhs)
                    changed = True

        for nt in self.non_terminals:
            if not first[nt] and nt not in nullable:
                raise GrammarException(f"Non-terminal {nt} derives no terminals.")
        return frozenset(nullable), {nt: frozenset(first[nt]) for nt in first}

    def _predict_table(
        self,
    ) -> Tuple[Dict[NonTerminal, Dict[Type, Production]], Dict[NonTerminal, Production]]:
        table: Dict[NonTerminal, Dict[Type, Production]] = {
            nt: {} for nt in NonTerminal
        }
        fallback: Dict[NonTerminal, Production] = {}
        for production in self.productions:
            symbols, is_nullable = self._first_of(
                production.rhs, self.nullable, self.first
            )
            for symbol in sorted(symbols, key=lambda t: list(Type).index(t)):
                if symbol in table[production.lhs]:
                    raise GrammarException(
                        f"Grammar is not LL(1): {production} and "
                        f"{table[production.lhs][symbol]} both start with {symbol}."
                    )
                table[production.lhs][symbol] = production
            if is_nullable:
                if production.lhs in fallback:
                    raise GrammarException(
                        f"Grammar is not LL(1): {production} and "
                        f"{fallback[production.lhs]} can both derive {EPSILON!r}."
                    )
                fallback[production.lhs] = production

        # A non-terminal with a single production always expands to it
        for nt in self.non_terminals:
            alternatives = self.alternatives(nt)
            if len(alternatives) == 1:
                fallback.setdefault(nt, alternatives[0])
        return table, fallback
