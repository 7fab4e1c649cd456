from typing import Any, Dict, List, Optional

import libcst as cst
from libcst.metadata import MetadataWrapper

from junitly.core.checks.enforce_test_class_name_convention.checker import ClassNameConventionCheckService
from junitly.core.diagnostics import Diagnostic
from junitly.core.lib.errors import MalformedNameError
from junitly.core.lib.log import LOGGER
from junitly.core.parsers.cst_adapter import ClassDeclarationCollector


class ClassNamingAnalyzer:
    """
    Runs the test class naming check over every class declaration of one file.

    Settings are read, and their patterns compiled, when the analyzer is
    created; an invalid pattern raises ConfigurationError from here.
    """

    def __init__(self, source_code: str, settings: Optional[Dict[str, Any]] = None, file_path: str = None):
        self.source_code = source_code
        self.file_path = file_path
        self.lines = source_code.splitlines()
        self.check_service = ClassNameConventionCheckService(settings)
        self.diagnostics: List[Diagnostic] = []

    def get_settings(self) -> Dict[str, Any]:
        return self.check_service.settings.convert_to_dict()

    def collect_class_declarations(self):
        module = cst.parse_module(self.source_code)
        collector = ClassDeclarationCollector()
        MetadataWrapper(module).visit(collector)
        LOGGER.debug(f"Collected {len(collector.class_declarations)} class declarations.")
        return collector.class_declarations

    def parse_code(self) -> Dict[str, Any]:
        self.diagnostics = []
        try:
            class_declarations = self.collect_class_declarations()
        except cst.ParserSyntaxError as e:
            LOGGER.error(f"Unable to parse {self.file_path or '<stdin>'}: {e}")
            return {'diagnostics': [], 'diagnostics_count': 0}

        for class_decl in class_declarations:
            try:
                issue = self.check_service.run_check(class_decl)
            except MalformedNameError as e:
                LOGGER.error(f"Skipping class declaration with a malformed name: {e}")
                continue
            if issue:
                LOGGER.info(f"Test class naming issue detected: {issue.message}")
                self.diagnostics.append(self._create_diagnostic(issue))

        return {'diagnostics': self.diagnostics, 'diagnostics_count': len(self.diagnostics)}

    def _create_diagnostic(self, issue) -> Diagnostic:
        full_line_length = 0
        if issue.lineno is not None and 0 < issue.lineno <= len(self.lines):
            full_line_length = len(self.lines[issue.lineno - 1])
        return Diagnostic(
            file_path=self.file_path,
            line=issue.lineno,
            col_offset=issue.col,
            end_col_offset=issue.end_col,
            severity=issue.severity,
            message=issue.message,
            issue_code=issue.code,
            rule_name=issue.rule_name,
            message_key=issue.message_key,
            full_line_length=full_line_length,
        )
