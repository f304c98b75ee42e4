"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError                     (application.py)
        ├── FeatureError                     (application/feature_flags/errors.py)
        │   ├── DuplicateInitializationError
        │   ├── InactiveFeatureError
        │   └── NoActiveFeatureError
        └── ConfigError                      (config/validation/errors.py)
            ├── MissingRequiredSettingError
            └── InvalidSettingValueError
"""

from featuring.kernel.errors.application import ApplicationError
from featuring.kernel.errors.base import BaseError

__all__ = [
    "ApplicationError",
    "BaseError",
]
