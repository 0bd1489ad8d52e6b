"""Cross-cutting utilities (lowest dependency layer).

This package provides shared primitives for:
    - Option-file validation (validators)
    - Curve sampling & bounding boxes (geometry)
    - Atomic I/O and YAML (fs)
    - Unified logging (logging_config)

No module in utils/ may import from upper layers (engine, svg, configs).

Convenience imports:
    from wavegen.utils import fs, geometry, validators
    from wavegen.utils.logging_config import setup_logging, push_context
"""

from . import fs
from . import geometry
from . import logging_config
from . import validators

from .logging_config import push_context, setup_logging

__all__ = [
    'fs',
    'geometry',
    'logging_config',
    'validators',
    'setup_logging',
    'push_context',
]
