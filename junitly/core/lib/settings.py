import re
from dataclasses import dataclass
from typing import Dict, Any, List, Optional

from junitly.core.lib.errors import ConfigurationError
from junitly.core.lib.rules import RuleCode
from junitly.core.lib.log import LOGGER


DEFAULT_EXPECTED_CLASS_NAME_REGEX = r".+Test\d*|.+Tests\d*|Test.+|Tests.+|.+IT|.+ITs|.+TestCase\d*|.+TestCases\d*"
DEFAULT_CLASS_ANNOTATION_NAME_REGEX = ""
DEFAULT_METHOD_ANNOTATION_NAME_REGEX = "Test|org.junit.Test"

DISABLED_PATTERN_MARKER = "<disabled>"

ALL_RULES_SELECTED = 'ALL'

DEFAULT_LINT_SELECT = [
    # JUnit-related Rules (JUN)
    RuleCode.JUN01.value,
]

DEFAULT_LINT_IGNORE = []

def ensure_dict(value):
    return value if isinstance(value, dict) else {}


def compile_pattern(option: str, pattern: Optional[str]) -> Optional[re.Pattern]:
    """
    Compile a configured regular expression.

    None and the empty string both disable the option; a disabled pattern is
    returned as None and never matches anything.
    """
    if pattern is None or pattern == "":
        return None
    if not isinstance(pattern, str):
        raise ConfigurationError(option, repr(pattern), "expected a string")
    try:
        # \d and \w stay ASCII-only, as in the JUnit tooling these patterns come from.
        return re.compile(pattern, re.ASCII)
    except re.error as e:
        raise ConfigurationError(option, pattern, str(e)) from e


def render_pattern(pattern: Optional[re.Pattern]) -> str:
    if pattern is None:
        return DISABLED_PATTERN_MARKER
    return pattern.pattern


@dataclass(frozen=True)
class NamingPatterns:
    expected_class_name: Optional[re.Pattern]
    class_annotation_name: Optional[re.Pattern]
    method_annotation_name: Optional[re.Pattern]

    @classmethod
    def from_strings(
        cls,
        expected_class_name_regex: Optional[str] = DEFAULT_EXPECTED_CLASS_NAME_REGEX,
        class_annotation_name_regex: Optional[str] = DEFAULT_CLASS_ANNOTATION_NAME_REGEX,
        method_annotation_name_regex: Optional[str] = DEFAULT_METHOD_ANNOTATION_NAME_REGEX,
    ) -> "NamingPatterns":
        # All three are compiled before the instance exists, so a bad option
        # never leaves a partially configured check behind.
        return cls(
            expected_class_name=compile_pattern('expectedClassNameRegex', expected_class_name_regex),
            class_annotation_name=compile_pattern('classAnnotationNameRegex', class_annotation_name_regex),
            method_annotation_name=compile_pattern('methodAnnotationNameRegex', method_annotation_name_regex),
        )


class JunitlySettings:
    def __init__(self, project_settings: Dict[str, Any]):
        if not project_settings:
            project_settings = {}

        self.lint = self.LintSettings(ensure_dict(project_settings.get('lint')))
        self.naming = self.NamingSettings(ensure_dict(project_settings.get('testClassNaming')))

    def convert_to_dict(self) -> Dict[str, Any]:
        return {
            'lint': {
                'select': self.lint.select,
                'ignore': self.lint.ignore,
            },
            'testClassNaming': {
                'expectedClassNameRegex': self.naming.expected_class_name_regex,
                'classAnnotationNameRegex': self.naming.class_annotation_name_regex,
                'methodAnnotationNameRegex': self.naming.method_annotation_name_regex,
            }
        }

    class LintSettings:
        def __init__(self, project_settings: Dict[str, Any]):
            selected_rules = project_settings.get('select', [])
            ignored_rules = project_settings.get('ignore', [])

            processed_selected_rules = self._process_rules(selected_rules)
            processed_ignored_rules = self._process_rules(ignored_rules)

            if not processed_selected_rules:
                processed_selected_rules = list(DEFAULT_LINT_SELECT)
            if not processed_ignored_rules:
                processed_ignored_rules = list(DEFAULT_LINT_IGNORE)

            if ALL_RULES_SELECTED in processed_selected_rules:
                processed_selected_rules = [rule.value for rule in RuleCode]

            self.select = processed_selected_rules
            self.ignore = processed_ignored_rules

        def _process_rules(self, rules: List[str]) -> List[str]:
            if not isinstance(rules, list):
                LOGGER.warning(f"Ignoring rule list that is not a list: {rules!r}")
                return []
            valid_rules = {rule.value for rule in RuleCode}
            valid_rules.add(ALL_RULES_SELECTED)
            processed_rules = []
            for rule in rules:
                if isinstance(rule, str) and rule.isalnum():
                    upper_rule = rule.upper()
                    if upper_rule in valid_rules:
                        processed_rules.append(upper_rule)
                        continue
                LOGGER.debug(f"Dropping unknown rule code {rule!r}")
            return processed_rules

    class NamingSettings:
        def __init__(self, project_settings: Dict[str, Any]):
            self.expected_class_name_regex = project_settings.get('expectedClassNameRegex', DEFAULT_EXPECTED_CLASS_NAME_REGEX)
            self.class_annotation_name_regex = project_settings.get('classAnnotationNameRegex', DEFAULT_CLASS_ANNOTATION_NAME_REGEX)
            self.method_annotation_name_regex = project_settings.get('methodAnnotationNameRegex', DEFAULT_METHOD_ANNOTATION_NAME_REGEX)
            self.patterns = NamingPatterns.from_strings(
                self.expected_class_name_regex,
                self.class_annotation_name_regex,
                self.method_annotation_name_regex,
            )


class SettingsLoader:
    @staticmethod
    def load_from_payload(settings_payload: Dict[str, Any]) -> JunitlySettings:
        return JunitlySettings(ensure_dict(settings_payload))
