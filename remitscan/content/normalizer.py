import asyncio
import uuid
from collections.abc import Callable
from concurrent.futures import Executor, ThreadPoolExecutor

from remitscan.content.exceptions import NormalizationError
from remitscan.content.handlers import DispatchRule, build_rules
from remitscan.content.models import ContentUnit, SourceFile
from remitscan.logging.logger import Log

ProgressCallback = Callable[[int], None]


class ContentNormalizer:
    """Converts source files into content units off the event loop.

    Every submission is tracked under a correlation id until its result is
    delivered; each submission resolves exactly once.
    """

    def __init__(
        self,
        rules: list[DispatchRule] | None = None,
        *,
        max_workers: int = 4,
        executor: Executor | None = None,
    ) -> None:
        self._rules = rules if rules is not None else build_rules()
        self._executor = executor or ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="normalize"
        )
        self._pending: dict[str, asyncio.Future[ContentUnit]] = {}

    @property
    def in_flight(self) -> int:
        return len(self._pending)

    def resolve(self, file: SourceFile) -> DispatchRule:
        """Return the first rule that matches the file."""
        for rule in self._rules:
            if rule.matches(file):
                return rule
        raise NormalizationError(file.name, "no handler for this file type")

    async def normalize(
        self,
        file: SourceFile,
        on_progress: ProgressCallback | None = None,
    ) -> ContentUnit:
        """Convert one file in the worker pool.

        Raises:
            NormalizationError: if the file cannot be read or parsed.
        """
        correlation_id = uuid.uuid4().hex
        loop = asyncio.get_running_loop()
        future = loop.run_in_executor(self._executor, self._convert, file)
        self._pending[correlation_id] = future
        Log.debug("Normalization submitted", correlation_id=correlation_id, file=file.name)
        try:
            unit = await future
        finally:
            self._pending.pop(correlation_id, None)
        if on_progress is not None:
            on_progress(100)
        return unit

    def close(self) -> None:
        self._executor.shutdown(wait=False, cancel_futures=True)

    def _convert(self, file: SourceFile) -> ContentUnit:
        rule = self.resolve(file)
        Log.info(f"Normalizing {file.name} via {rule.name}")
        try:
            return rule.handle(file)
        except NormalizationError:
            raise
        except Exception as exc:
            raise NormalizationError(file.name, str(exc) or type(exc).__name__) from exc
