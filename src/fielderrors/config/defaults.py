"""Default configuration values for fielderrors."""

# Record name used by the structured output format
STRUCTURED_ERROR_NAME = "ValidatorError"

# Output format used when neither the caller nor a config file picks one
DEFAULT_OUTPUT_FORMAT = "plain"

# Environment variable overriding output_format from a configuration file
OUTPUT_FORMAT_ENV_VAR = "FIELDERRORS_OUTPUT_FORMAT"
