import sys

from scanparse.parser.derivation import Derivation, DerivationStep
from scanparse.parser.grammar import Grammar, NonTerminal, Production
from scanparse.parser.parser import Parser
from scanparse.scanner.scanner import Scanner
from scanparse.token import Token
from scanparse.type import Type

__version__ = "0.1.0"

# Default is 1000, every level of brackets takes three frames
sys.setrecursionlimit(5000)
