__path__ = __import__("pkgutil").extend_path(__path__, __name__)  # NOQA: F-821
__title__ = 'usher'
__author__ = 'Eiko Reishin (影皇嶺臣)'
__license__ = 'MIT'
# Placeholder, modified by dynamic-versioning.
__version__ = "0.0.0"

from .descriptors import *
from .comparators import *
from .labels import *
from .renderers import *
from .table import *
from .layout import *
from .synopses import *
from .help import *
from .faults import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

# Placeholder, modified by dynamic-versioning.
version_info = VersionInfo(0, 0, 0, "final", 0, "")

__all__ = (
    "__path__",
    "__title__",
    "__author__",
    "__license__",
    "__version__",
    "version_info"
)

# Load the exposed API of the descriptors
__all__ += descriptors.__all__  # type: ignore[attr-defined]
# Load the exposed API of the comparators
__all__ += comparators.__all__  # type: ignore[attr-defined]
# Load the exposed API of the value-label renderers
__all__ += labels.__all__  # type: ignore[attr-defined]
# Load the exposed API of the cell renderers
__all__ += renderers.__all__  # type: ignore[attr-defined]
# Load the exposed API of the text table
__all__ += table.__all__  # type: ignore[attr-defined]
# Load the exposed API of the layouts
__all__ += layout.__all__  # type: ignore[attr-defined]
# Load the exposed API of the synopsis builder
__all__ += synopses.__all__  # type: ignore[attr-defined]
# Load the exposed API of the help facade
__all__ += help.__all__  # type: ignore[attr-defined]
# Load the exposed API of the faults
__all__ += faults.__all__  # type: ignore[attr-defined]
