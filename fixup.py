from typing import Optional

from nodes import ConjunctionType, InternalNode, Node, TermForm, TerminalNode


def fix_up_expression_tree(node: Optional[Node], is_root: bool = False) -> Optional[Node]:
    """Rewrite the parts of an expression tree that SQL Server can't accept.

    Children are fixed up before their parent is inspected:

        NOT term1 AND term2        subexpressions swapped
        NOT term1                  discarded
        NOT term1 AND NOT term2    discarded if grouped or at the root; otherwise
                                   the enclosing expression may still use it
        term1 OR NOT term2         discarded, along with the rest of the OR
        term1 NEAR NOT term2       NEAR changed to AND

    Returns the repaired subtree, or None when nothing valid is left.
    """
    # Each new term is joined on the right, so a flat query hangs down the
    # left side. Walk that side with a loop; only right operands recurse,
    # which keeps the depth to the nesting of (...) and <...> blocks.
    spine = []
    while isinstance(node, InternalNode):
        spine.append(node)
        node = node.left

    node = eliminate_excluded(node, is_root and not spine)
    for depth in range(len(spine) - 1, -1, -1):
        internal = spine[depth]
        internal.left = node
        internal.right = fix_up_expression_tree(internal.right)
        node = eliminate_excluded(fix_up_conjunction(internal), is_root and depth == 0)
    return node


def fix_up_conjunction(node: InternalNode) -> Optional[Node]:
    """Applies the conjunction rules to a node whose children are already fixed up."""
    if node.conjunction is ConjunctionType.NEAR:
        if is_invalid_with_near(node.left) or is_invalid_with_near(node.right):
            node.conjunction = ConjunctionType.AND
    elif node.conjunction is ConjunctionType.OR:
        # Keeping only the valid side would change what the OR matches
        if is_invalid_with_or(node.left) or is_invalid_with_or(node.right):
            return None

    if node.left is None and node.right is None:
        return None
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left

    node.exclude = node.left.exclude and node.right.exclude
    # An excluded operand must never come first
    if not node.exclude and node.left.exclude:
        node.left, node.right = node.right, node.left
    return node


def eliminate_excluded(node: Optional[Node], is_root: bool) -> Optional[Node]:
    # Nothing outside a group or above the root can make an exclusion valid
    if node is None or ((node.grouped or is_root) and node.exclude):
        return None
    return node


def is_invalid_with_near(node: Optional[Node]) -> bool:
    # NEAR only joins literal terms
    return not isinstance(node, TerminalNode) or node.form is not TermForm.LITERAL


def is_invalid_with_or(node: Optional[Node]) -> bool:
    return node is None or node.exclude
