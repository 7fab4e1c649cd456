from typing import Any, Dict, Optional

from junitly.core.lib.settings import JunitlySettings
from junitly.core.lib.settings import NamingPatterns


class BaseCheckService:
    def __init__(self, updated_settings: Optional[Dict[str, Any]] = None):
        super().__init__()
        # Patterns are compiled here, once.
        self.settings = JunitlySettings(updated_settings or {})
        self.selected_rules = self.settings.lint.select
        self.ignored_rules = self.settings.lint.ignore

    def is_rule_enabled(self, rule_code: str) -> bool:
        return rule_code in self.selected_rules and rule_code not in self.ignored_rules

    def get_naming_patterns(self) -> NamingPatterns:
        return self.settings.naming.patterns
