import sys
import json

from junitly.core.lib.errors import ConfigurationError
from junitly.core.lib.log import LOGGER
from junitly.core.lib.settings import ensure_dict
from junitly.core.parsers.class_analyzer import ClassNamingAnalyzer

def main(argv=None):
    argv = sys.argv if argv is None else argv
    if len(argv) < 3:
        LOGGER.error("Usage: junitly <current_filepath> <extension_settings>")
        sys.exit(1)

    current_filepath = argv[1]
    try:
        extension_settings = json.loads(argv[2])
    except json.JSONDecodeError as e:
        LOGGER.error(f"Error parsing settings JSON: {e}")
        sys.exit(1)
    input_code = sys.stdin.read()

    try:
        analyzer = ClassNamingAnalyzer(
            source_code=input_code,
            settings=ensure_dict(extension_settings),
            file_path=current_filepath,
        )
    except ConfigurationError as e:
        LOGGER.error(f"Invalid configuration: {e}")
        sys.exit(1)

    LOGGER.info(f"Test class naming analyzer initialized {current_filepath}")
    LOGGER.debug(f"Analyzer running with settings: {analyzer.get_settings()}")

    result = analyzer.parse_code()
    diagnostics_output = [diagnostic.to_dict() for diagnostic in result['diagnostics']]
    diagnostics_to_return = {"diagnostics": diagnostics_output, "diagnostics_count": result['diagnostics_count']}

    print(json.dumps(diagnostics_to_return))

if __name__ == "__main__":
    main()
