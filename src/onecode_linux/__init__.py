"""Top-level package for 1code-linux.

Unofficial community installer that builds 1Code from source.
1Code is developed by 21st.dev - https://github.com/21st-dev/agents
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("1code-linux")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
