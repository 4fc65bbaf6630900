"""Device and treatment age monitors with threshold notifications."""

__version__ = "0.1.0"

# Initialise core before ports so the core <-> ports import cycle resolves
# regardless of which submodule is imported first.
import device_age.core  # noqa: E402,F401
