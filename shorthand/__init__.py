__path__ = __import__("pkgutil").extend_path(__path__, __name__)  # NOQA: F-821
__title__ = 'shorthand'
__author__ = 'Shorthand contributors'
__license__ = 'MIT'
__version__ = "0.1.0"

from .faults import *
from .index import *
from .parsing import *
from .rewriter import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

version_info = VersionInfo(0, 1, 0, "final", 0, "")

__all__ = (
    "__path__",
    "__title__",
    "__author__",
    "__license__",
    "__version__",
    "version_info"
)

# Load the exposed API of the faults
__all__ += faults.__all__  # type: ignore[attr-defined]
# Load the exposed API of the index
__all__ += index.__all__  # type: ignore[attr-defined]
# Load the exposed API of the parsing bridge
__all__ += parsing.__all__  # type: ignore[attr-defined]
# Load the exposed API of the rewriter
__all__ += rewriter.__all__  # type: ignore[attr-defined]
