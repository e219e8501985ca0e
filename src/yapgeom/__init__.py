# -*- coding: utf-8 -*-
import logging
from importlib.metadata import PackageNotFoundError, version


try:
    __version__ = version("yapgeom")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

## silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())
