import re
from typing import Optional, Sequence

from junitly.core.checks.base import BaseCheckService
from junitly.core.lib.log import LOGGER
from junitly.core.lib.rules import RuleCode
from junitly.core.lib.settings import render_pattern
from junitly.core.tree.names import identifier_token
from junitly.core.tree.names import resolve_qualified_name
from junitly.core.tree.nodes import ClassDecl, Modifier, NodeKind
from .constants import ClassNameConventionIssue


def is_matching(pattern: Optional[re.Pattern], value: str) -> bool:
    """Full-string match; a disabled (None) pattern matches nothing."""
    if pattern is None:
        return False
    return pattern.fullmatch(value) is not None


def has_matching_annotation(modifiers: Sequence[Modifier], pattern: Optional[re.Pattern]) -> bool:
    if pattern is None:
        return False
    return any(
        modifier.kind is NodeKind.ANNOTATION and is_matching(pattern, resolve_qualified_name(modifier.name))
        for modifier in modifiers
    )


def is_expected_name(name: str, pattern: Optional[re.Pattern]) -> bool:
    # A disabled pattern fails every name, so every classified test class is reported.
    return is_matching(pattern, name)


class ClassNameConventionCheckService(BaseCheckService):
    """
    Checks that classes recognised as tests are named after the expected pattern.

    A class is a test when it carries an annotation matching the class
    annotation pattern, or when one of its direct methods carries an
    annotation matching the method annotation pattern. Annotation names are
    compared as spelled: `Test` and `org.junit.Test` are different names.
    """

    def __init__(self, updated_settings=None):
        super().__init__(updated_settings)
        self.patterns = self.get_naming_patterns()

    def is_class_annotated(self, class_decl: ClassDecl) -> bool:
        return has_matching_annotation(class_decl.modifiers, self.patterns.class_annotation_name)

    def is_any_method_annotated(self, class_decl: ClassDecl) -> bool:
        pattern = self.patterns.method_annotation_name
        if pattern is None:
            return False
        return any(
            member.kind is NodeKind.METHOD and has_matching_annotation(member.modifiers, pattern)
            for member in class_decl.members
        )

    def is_test_class(self, class_decl: ClassDecl) -> bool:
        return self.is_class_annotated(class_decl) or self.is_any_method_annotated(class_decl)

    def run_check(self, class_decl: ClassDecl) -> Optional[ClassNameConventionIssue]:
        """Return an issue when a test class is not named after the expected pattern."""
        if not self.is_rule_enabled(RuleCode.JUN01.value):
            LOGGER.debug("Skipping test class naming check as the rule is disabled")
            return None

        if not self.is_test_class(class_decl):
            return None

        class_name = resolve_qualified_name(class_decl.identifier)
        LOGGER.debug(f"Running test class naming check on {class_name}")
        if is_expected_name(class_name, self.patterns.expected_class_name):
            return None

        return self.create_naming_issue(class_decl, class_name)

    def create_naming_issue(self, class_decl: ClassDecl, class_name: str) -> ClassNameConventionIssue:
        token = identifier_token(class_decl.identifier)
        return ClassNameConventionIssue(
            lineno=token.lineno,
            col=token.col_offset,
            end_col=token.end_col_offset,
            class_name=class_name,
            expected_regex=render_pattern(self.patterns.expected_class_name),
        )
