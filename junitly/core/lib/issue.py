from junitly.core.lib.rules import RULES, RuleCode


class IssueSeverity:
    ERROR = 'ERROR'
    INFORMATION = 'INFORMATION'
    WARNING = 'WARNING'
    HINT = 'HINT'


class Issue(object):
    """
    Abstract class for issues.
    """
    code = ''
    message_key = ''
    description = ''
    severity = IssueSeverity.WARNING

    def __init__(self, lineno, col, severity=None, parameters=None, end_col=None):
        self.parameters = {} if parameters is None else parameters
        self.col = col
        self.end_col = end_col
        self.lineno = lineno
        if severity is not None:
            self.severity = severity

    @property
    def message(self):
        """
        Return issue message.
        """
        message = self.description.format(**self.parameters)
        return '{code} {message}'.format(code=self.code, message=message)

    @property
    def rule_name(self):
        """
        Return the registered name of the violated rule.
        """
        return RULES[RuleCode(self.code)].name

    def __repr__(self):
        return '<{cls} {code} at {lineno}:{col}>'.format(
            cls=type(self).__name__, code=self.code, lineno=self.lineno, col=self.col
        )
