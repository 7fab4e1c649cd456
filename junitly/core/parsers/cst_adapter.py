from typing import List, Optional

import libcst as cst
from libcst.metadata import PositionProvider

from junitly.core.tree.nodes import Annotation, ClassDecl, Dot, Ident, MethodDecl, NameNode, Other


def code_for_node(node: cst.CSTNode) -> str:
    return cst.Module([]).code_for_node(node)


def to_name_node(expression: cst.BaseExpression) -> Optional[NameNode]:
    """Convert `Name` and `Attribute` chains; anything else has no dotted name."""
    if isinstance(expression, cst.Name):
        return Ident(expression.value)
    if isinstance(expression, cst.Attribute):
        left = to_name_node(expression.value)
        if left is None:
            return None
        return Dot(left, Ident(expression.attr.value))
    return None


def to_modifier(decorator: cst.Decorator):
    """`@Test`, `@org.junit.Test` and `@RunWith(...)` become annotations."""
    expression = decorator.decorator
    if isinstance(expression, cst.Call):
        expression = expression.func
    name = to_name_node(expression)
    if name is None:
        return Other(code_for_node(decorator.decorator))
    return Annotation(name)


class ClassDeclarationCollector(cst.CSTVisitor):
    """Collects every class of a module, nested ones included, in source order."""
    METADATA_DEPENDENCIES = (PositionProvider,)

    def __init__(self):
        super().__init__()
        self.class_declarations: List[ClassDecl] = []

    def visit_ClassDef(self, node: cst.ClassDef):
        self.class_declarations.append(self.to_class_decl(node))

    def to_ident(self, name: cst.Name) -> Ident:
        position = self.get_metadata(PositionProvider, name)
        return Ident(
            text=name.value,
            lineno=position.start.line,
            col_offset=position.start.column,
            end_col_offset=position.end.column,
        )

    def to_class_decl(self, node: cst.ClassDef) -> ClassDecl:
        return ClassDecl(
            identifier=self.to_ident(node.name),
            modifiers=tuple(to_modifier(decorator) for decorator in node.decorators),
            members=tuple(self.to_member(statement) for statement in node.body.body),
        )

    def to_member(self, statement: cst.CSTNode):
        if isinstance(statement, cst.FunctionDef):
            return MethodDecl(
                name=self.to_ident(statement.name),
                modifiers=tuple(to_modifier(decorator) for decorator in statement.decorators),
            )
        if isinstance(statement, cst.ClassDef):
            # Checked on its own visit; here it only counts as a member.
            return Other(f"class {statement.name.value}")
        return Other(type(statement).__name__)
