"""PathSight conversion and geometry engine."""

from pathsight.engine.registry import converter, get_registry

# Importing the converter modules registers them
from pathsight.engine.absolute import to_absolute
from pathsight.engine.relative import to_relative
from pathsight.engine.normalize import normalize
from pathsight.engine.curve import fix_path, to_curve
from pathsight.engine.optimize import optimize
from pathsight.engine.reverse import reverse

__all__ = [
    "converter",
    "get_registry",
    "to_absolute",
    "to_relative",
    "normalize",
    "to_curve",
    "fix_path",
    "optimize",
    "reverse",
]
