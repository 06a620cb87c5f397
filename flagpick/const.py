import re

VERSION = (0, 3, 1)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"
DESCRIPTION = "Pick typed values out of command line arguments"

FLAG_PATTERN = re.compile(r"^--?[A-Za-z]")
EXTRA_ARGS_ENV = "FLAGPICK_EXTRA_ARGS"

REQUIRED = "required"
OPTIONAL = "optional"
