from junitly.core.lib.errors import MalformedNameError
from junitly.core.tree.nodes import Ident, NameNode, NodeKind


def resolve_qualified_name(name_node: NameNode) -> str:
    """
    Return the name exactly as spelled in the source.

    An identifier resolves to its text. A dot-chain is walked from its
    rightmost segment back to the leftmost identifier, so Dot(Dot(org, junit), Test)
    resolves to "org.junit.Test". Nothing is normalized or looked up.
    """
    kind = getattr(name_node, 'kind', None)
    if kind is NodeKind.IDENT:
        return name_node.text
    if kind is not NodeKind.DOT:
        raise MalformedNameError(name_node)

    result = ""
    node = name_node
    while getattr(node, 'kind', None) is NodeKind.DOT:
        if getattr(node.right, 'kind', None) is not NodeKind.IDENT:
            raise MalformedNameError(name_node)
        result = "." + node.right.text + result
        node = node.left

    if getattr(node, 'kind', None) is not NodeKind.IDENT:
        raise MalformedNameError(name_node)
    return node.text + result


def identifier_token(name_node: NameNode) -> Ident:
    """The identifier a diagnostic should point at: the last segment of a dotted name."""
    kind = getattr(name_node, 'kind', None)
    if kind is NodeKind.IDENT:
        return name_node
    if kind is NodeKind.DOT and getattr(name_node.right, 'kind', None) is NodeKind.IDENT:
        return name_node.right
    raise MalformedNameError(name_node)
