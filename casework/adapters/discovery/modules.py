"""Module-based candidate discovery.

Builds the candidate pool by importing modules and collecting the
classes they define. Whether a class is a fixture is left to the
convention.
"""

import importlib
import inspect
import logging
from collections.abc import Iterable
from types import ModuleType

logger = logging.getLogger(__name__)


def classes_defined_in(module: ModuleType) -> list[type]:
    """Classes defined in ``module`` itself, in definition order.

    Classes imported from elsewhere are skipped so a fixture imported into
    several modules is only collected where it is defined.
    """
    return [
        obj
        for obj in vars(module).values()
        if inspect.isclass(obj) and obj.__module__ == module.__name__
    ]


class ModuleCandidateSource:
    """Candidate pool drawn from a list of importable module names."""

    def __init__(self, module_names: Iterable[str]):
        self.module_names = list(module_names)

    def candidates(self) -> list[type]:
        """Import each module and collect its classes.

        Raises:
            ImportError: If a module cannot be imported.
        """
        pool: list[type] = []
        for module_name in self.module_names:
            module = importlib.import_module(module_name)
            found = classes_defined_in(module)
            logger.debug(f"Collected {len(found)} candidate types from {module_name}")
            pool.extend(found)
        return pool
