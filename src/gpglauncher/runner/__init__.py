"""gpg process execution.

This module runs the external tool and feeds it input:
- ProcessRunner: subprocess invocation with concurrent output capture
- scoped_temp_file: temporary input files removed on every exit path
"""

from .process import ProcessRunner
from .tempfiles import scoped_temp_file

__all__ = ["ProcessRunner", "scoped_temp_file"]
