from enum import Enum
from typing import Optional


class TermForm(Enum):
    INFLECTIONAL = 'inflectional'
    THESAURUS = 'thesaurus'
    LITERAL = 'literal'


class ConjunctionType(Enum):
    AND = 'AND'
    OR = 'OR'
    NEAR = 'NEAR'


class Node:
    """Base class of the expression tree"""

    def __init__(self, exclude=False, grouped=False):
        # For an InternalNode, exclude means both children are excluded
        self.exclude = exclude
        # Set when the user wrapped this subexpression in parentheses
        self.grouped = grouped

    def __eq__(self, other):
        return type(self) is type(other) and vars(self) == vars(other)


class TerminalNode(Node):
    """Leaf node holding a single term or quoted phrase"""

    def __init__(self, term: str, form: TermForm, exclude=False, grouped=False):
        super().__init__(exclude, grouped)
        self.term = term
        self.form = form

    def __str__(self):
        prefix = 'NOT ' if self.exclude else ''
        if self.form is TermForm.INFLECTIONAL:
            return f'{prefix}FORMSOF(INFLECTIONAL, {self.term})'
        if self.form is TermForm.THESAURUS:
            return f'{prefix}FORMSOF(THESAURUS, {self.term})'
        return f'{prefix}"{self.term}"'

    def __repr__(self):
        return f'TerminalNode({self.term!r}, {self.form.name}, exclude={self.exclude}, grouped={self.grouped})'


class InternalNode(Node):
    """Conjunction (AND/OR/NEAR) of two subexpressions"""

    def __init__(self, left: Node, right: Node, conjunction: ConjunctionType, exclude=False, grouped=False):
        super().__init__(exclude, grouped)
        self.left = left
        self.right = right
        self.conjunction = conjunction

    def __str__(self):
        # Render the left-hand chain with a loop; only right operands recurse
        spine = []
        node = self
        while isinstance(node, InternalNode):
            spine.append(node)
            node = node.left
        text = str(node)
        for internal in reversed(spine):
            text = f'{text} {internal.conjunction.value} {internal.right}'
            if internal.grouped:
                text = f'({text})'
        return text

    def __repr__(self):
        return f'({self.left!r} {self.conjunction.value} {self.right!r})'


def render(node: Optional[Node]) -> str:
    """Return the full-text condition for a tree, or '' for an empty tree."""
    if node is None:
        return ''
    return str(node)
