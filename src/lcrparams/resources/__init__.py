"""Resource files and configuration templates."""

from lcrparams.constants import DEFAULT_TARGET_LENGTH, MISSING_LENGTH_DEFAULT


def get_default_config(
    default_target_length: int = DEFAULT_TARGET_LENGTH,
    missing_length: str = MISSING_LENGTH_DEFAULT,
) -> str:
    """Return configuration YAML content, defaults unless overridden."""
    return f"""# lcrparams Configuration File

# Target length used when -l is out of range (5-300)
default_target_length: {default_target_length}

# What to do when -l is not given:
#   default  - use default_target_length (a warning is logged)
#   sentinel - compute on the unset value -1, so every row is reported as NA
missing_length: "{missing_length}"

# Runtime settings
runtime:
  log_level: "WARNING"
  log_file: ~
"""
