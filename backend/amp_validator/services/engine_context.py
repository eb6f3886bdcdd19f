"""Engine context: owns the validator engine handle and its one-time load.

State machine: UNINITIALIZED -> (load) -> READY. Every marshalling and
reporting call goes through require_engine(), which fails fast while the
engine is not READY.
"""

import asyncio
import importlib
import inspect
import time
from enum import Enum
from typing import Awaitable, Callable, Optional, Protocol, Union

import structlog

from amp_validator.config import get_settings
from amp_validator.errors import EngineLoadError, EngineUninitializedError

logger = structlog.get_logger()


class ValidatorEngine(Protocol):
    """Binary call interface of the external validator engine."""

    def validate_string(self, document_text: str, format_name: str, max_errors: int) -> Union[bytes, str]:
        ...

    def render_error_message(self, error_payload: bytes) -> str:
        ...

    def render_inline_result(self, result_payload: bytes, filename: str, document_text: str) -> str:
        ...


EngineLoader = Callable[[], Awaitable[ValidatorEngine]]


class EngineState(str, Enum):
    """Engine lifecycle states."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"


async def load_configured_engine() -> ValidatorEngine:
    """Import and call the engine factory named by ENGINE_FACTORY ("module:callable").

    Synchronous factories run in a worker thread so the event loop stays free
    while the engine boots.
    """
    factory_path = get_settings().ENGINE_FACTORY
    module_name, _, attr = factory_path.partition(":")
    if not module_name or not attr:
        raise EngineLoadError(
            f"ENGINE_FACTORY must look like 'package.module:callable', got {factory_path!r}"
        )

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise EngineLoadError(f"Cannot import engine module '{module_name}': {e}") from e

    factory = getattr(module, attr, None)
    if factory is None:
        raise EngineLoadError(f"Engine module '{module_name}' has no attribute '{attr}'")

    if inspect.iscoroutinefunction(factory):
        return await factory()
    return await asyncio.to_thread(factory)


class ValidatorContext:
    """Holds the engine handle, its readiness, and the single in-flight load.

    init() is idempotent: callers arriving while a load is running all await
    the same task, so the loader runs once no matter how many callers race.
    A failed load leaves the context UNINITIALIZED and may be retried.
    """

    def __init__(self, loader: Optional[EngineLoader] = None):
        self._loader = loader or load_configured_engine
        self._engine: Optional[ValidatorEngine] = None
        self._pending: Optional[asyncio.Future] = None

    @property
    def state(self) -> EngineState:
        return EngineState.READY if self._engine is not None else EngineState.UNINITIALIZED

    @property
    def is_ready(self) -> bool:
        return self._engine is not None

    async def init(self) -> ValidatorEngine:
        """Load the engine once; concurrent callers share the in-flight load."""
        if self._engine is not None:
            return self._engine
        if self._pending is None:
            self._pending = asyncio.ensure_future(self._load())
        # Shielded so a cancelled waiter never aborts the shared load.
        return await asyncio.shield(self._pending)

    async def _load(self) -> ValidatorEngine:
        logger.info("engine_load_started")
        start_time = time.perf_counter()
        try:
            engine = await self._loader()
        except EngineLoadError as e:
            self._pending = None
            logger.error("engine_load_failed", error=str(e))
            raise
        except Exception as e:
            self._pending = None
            logger.error("engine_load_failed", error=str(e), error_type=type(e).__name__)
            raise EngineLoadError(f"Validator engine failed to load: {e}") from e

        self._engine = engine
        self._pending = None
        logger.info(
            "engine_loaded",
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return engine

    def require_engine(self) -> ValidatorEngine:
        """Return the loaded engine or fail with EngineUninitializedError."""
        if self._engine is None:
            raise EngineUninitializedError()
        return self._engine


# Module-level singleton
default_context = ValidatorContext()
