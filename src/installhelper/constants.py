"""Shared constants for InstallHelper."""

DEFAULT_MODEL = "gpt-4o"
DEFAULT_API_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_API_KEY_ENV = "OPENAI_API_KEY"

INSTALL_SCRIPT_FILE = "install_script.sh"
INSTRUCTIONS_FILE = "simplified_instructions.html"
DEFAULT_CONFIG_FILE = ".installhelper.yml"

SCRIPT_MODE = 0o755

README_CANDIDATES = ("README.md", "README")
README_PREFIX = "readme"

# a literal "null" completion counts as missing
NULL_SENTINEL = "null"

INSTALL_SYSTEM_PROMPT = (
    "You are a helpful AI assistant. You will be provided with a README file content, "
    "from which you must produce a single bash script that will install the package "
    "indicated in the README if possible."
)
INSTALL_USER_PROMPT = (
    "Please create a bash script to install the package described in the README. "
    "Make sure the script is self-contained and contains steps to install all "
    "dependencies if possible. Reply with the script only and nothing else. "
    "No label, no triplebackticks."
)

INSTRUCTIONS_SYSTEM_PROMPT = (
    "You are a helpful AI assistant. You will be provided with a README file content, "
    "from which you must produce a simplified set of instructions in the user requested "
    "language, returning the response as HTML."
)
INSTRUCTIONS_USER_PROMPT = (
    "Please create a simplified set of instructions in the requested language, "
    "focusing on the essential steps. Return the instructions as valid HTML. "
    "Only provide the HTML content."
)
