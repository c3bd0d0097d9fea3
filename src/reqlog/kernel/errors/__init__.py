"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    ReqlogError
    ├── MiddlewareNotInstalledError       (also a RuntimeError)
    └── ConfigError                       (reqlog.config.validation)
        └── InvalidSettingValueError
"""

from reqlog.kernel.errors.base import ReqlogError
from reqlog.kernel.errors.wiring import MiddlewareNotInstalledError

__all__ = ["MiddlewareNotInstalledError", "ReqlogError"]
