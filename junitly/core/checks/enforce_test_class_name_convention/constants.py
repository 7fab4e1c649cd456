from junitly.core.lib.issue import Issue
from junitly.core.lib.issue import IssueSeverity
from junitly.core.lib.rules import RuleCode


MSG_KEY = "name.convention.for.test.classes"


class ClassNameConventionIssue(Issue):
    code = RuleCode.JUN01.value
    message_key = MSG_KEY
    description = "Test class name '{class_name}' does not match expected pattern '{expected_regex}'."

    def __init__(self, lineno, col, class_name, expected_regex, severity=IssueSeverity.WARNING, end_col=None):
        super().__init__(
            lineno,
            col,
            severity,
            parameters={"class_name": class_name, "expected_regex": expected_regex},
            end_col=end_col,
        )
