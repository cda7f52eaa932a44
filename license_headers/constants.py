"""Constants for license-headers."""

# Exit codes
EXIT_SUCCESS = 0  # All files carry approved license headers
EXIT_ISSUES = 1  # License header problems found
EXIT_ERROR = 2  # Check failed due to error

# Report location relative to the build directory
REPORT_DIR = "reports/licenseHeaders"
REPORT_NAME = "rat.log"

# Report markers read by the interpreter
ZERO_UNKNOWN_MARKER = "0 Unknown Licenses"
PROBLEM_MARKER = " !"
SECTION_DELIMITER = "*" * 31
UNAPPROVED_SECTION = 2

# Width of the delimiter rows written into reports
REPORT_RULE_WIDTH = 53
