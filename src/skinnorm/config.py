# config.py
import os

# Mojang endpoints used to resolve a username to its texture URLs
MOJANG_PROFILE_URL = "https://api.mojang.com/users/profiles/minecraft/{}"
MOJANG_SESSION_URL = "https://sessionserver.mojang.com/session/minecraft/profile/{}"

# Seconds to wait for any HTTP request
REQUEST_TIMEOUT = float(os.environ.get("SKINNORM_REQUEST_TIMEOUT", "10"))

# Logging level for the command line
# Options: "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"
LOG_LEVEL = os.environ.get("SKINNORM_LOG_LEVEL", "INFO").upper()

# Appended to the input file name when no output path is given
OUTPUT_SUFFIX = "_normalized"
