from collections import deque
from typing import Iterator, List, Optional

from scanparse.tree.tree import Node


class LevelOrderPrinter:
    """Print a parse tree breadth-first, with one line per level of the tree.

    For `a+b` this gives:

        EXPR
        TERM EXPRDASH
        FACTOR TERMDASH PLUS TERM EXPRDASH
        IDENTIFIER(a) EPSILON FACTOR TERMDASH EPSILON
        IDENTIFIER(b) EPSILON
    """

    def __init__(self, separator: str = " ") -> None:
        self.separator = separator

    def levels(self, tree: Optional[Node]) -> Iterator[List[str]]:
        if tree is None:
            return

        queue = deque([tree])
        while queue:
            level = list(queue)
            queue.clear()
            yield [node.label for node in level]
            for node in level:
                queue.extend(node.children)

    def print(self, tree: Optional[Node]) -> str:
        return "\n".join(self.separator.join(level) for level in self.levels(tree))
