from typing import Dict
from enum import Enum

class RuleCode(Enum):
    # JUnit-related Rules (JUN)
    JUN01 = "JUN01"


class Rule:
    def __init__(self, code: RuleCode, name: str, description: str, additional_info: str = None):
        self.code = code
        self.name = name
        self.description = description
        self.additional_info = additional_info


RULES: Dict[RuleCode, Rule] = {
    RuleCode.JUN01: Rule(
        code=RuleCode.JUN01,
        name="TEST_CLASS_NAME_CONVENTION",
        description="Test classes should have names matching the expected class name pattern.",
        additional_info=(
            "A class is a test when it carries an annotation matching `classAnnotationNameRegex` "
            "or one of its methods carries an annotation matching `methodAnnotationNameRegex`. "
            "Annotation names are matched exactly as spelled in the source."
        )
    ),
}
