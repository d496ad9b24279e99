"""
Default values for the profile editor.
"""

DEFAULT_INSTRUCTIONS = "You are a helpful assistant."
DEFAULT_MODEL = "gpt-4-turbo-preview"
DEFAULT_AUTHOR = "user"

DEFAULT_TEMPERATURE = 1.0
DEFAULT_TOP_P = 1.0

TEMPERATURE_RANGE = (0.0, 2.0)
TOP_P_RANGE = (0.0, 1.0)
SAMPLING_STEP = 0.01

NO_DEFAULT_LABEL = "N/A"
MODEL_NONE_LABEL = "Default"

DEFAULT_THEME = "light"
SUPPORTED_THEMES = {"light", "dark"}

# Upper bound for inline SVG icons, in bytes of UTF-8 markup.
DEFAULT_MAX_VECTOR_BYTES = 256 * 1024

DEFAULT_NOTIFY_TIMEOUT_SECONDS = 5.0
DEFAULT_NOTIFY_ERROR_TIMEOUT_SECONDS = 8.0

SUCCESS_MESSAGE = "Form submitted successfully."
