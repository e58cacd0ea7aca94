"""Composition root for the Casework execution engine.

This module is the ONLY location that imports both core engine logic
and concrete adapter implementations. All wiring of dependencies
happens here.

Module Structure:
- Configuration loading via config module
- Logging setup
- Adapter instantiation
- Engine construction and runs
"""

import logging
import sys
from collections.abc import Iterable

from casework.adapters.discovery.modules import ModuleCandidateSource
from casework.adapters.invocation.dispatch import DispatchTable
from casework.adapters.invocation.reflective import ReflectiveInvoker
from casework.adapters.listener.log import LoggingResultListener
from casework.adapters.metadata.registry import TraitRegistry
from casework.config import Settings, load_settings
from casework.core.convention import default_convention
from casework.core.engine import ExecutionEngine
from casework.core.models import RunResult
from casework.core.ports import InvocationPort, ResultListenerPort, Substrate


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def build_engine(
    settings: Settings,
    listener: ResultListenerPort | None = None,
) -> ExecutionEngine:
    """Wire adapters and the default convention into an engine.

    Args:
        settings: Loaded settings.
        listener: Result listener; defaults to LoggingResultListener.

    Returns:
        Ready-to-run ExecutionEngine.
    """
    logger = logging.getLogger(__name__)

    metadata = TraitRegistry()

    invoker: InvocationPort
    if settings.invocation_mode == "reflective":
        invoker = ReflectiveInvoker()
    else:
        invoker = DispatchTable(metadata)
    logger.debug(f"Invocation adapter: {type(invoker).__name__}")

    if listener is None:
        listener = LoggingResultListener(verbose=settings.debug)

    convention = default_convention(
        metadata, always_run_teardown=settings.always_run_teardown
    )
    return ExecutionEngine(
        convention=convention,
        substrate=Substrate(metadata=metadata, invoker=invoker),
        listener=listener,
    )


def run(
    module_names: Iterable[str] | None = None,
    settings: Settings | None = None,
    listener: ResultListenerPort | None = None,
) -> RunResult:
    """Load configuration, collect candidates and execute them.

    Args:
        module_names: Modules forming the candidate pool. Defaults to
            ``settings.candidate_modules``.
        settings: Settings to use; loaded from the environment if omitted.
        listener: Result listener passed to build_engine().

    Returns:
        The RunResult of the whole run.

    Raises:
        ImportError: If a candidate module cannot be imported.
    """
    if settings is None:
        settings = load_settings()
    configure_logging(
        "DEBUG" if settings.debug else settings.log_level, settings.log_format
    )

    logger = logging.getLogger(__name__)
    names = list(module_names) if module_names is not None else settings.candidate_modules
    logger.info(f"Collecting candidates from {len(names)} modules")

    candidates = ModuleCandidateSource(names).candidates()
    engine = build_engine(settings, listener=listener)
    return engine.run(candidates)
