"""Structlog-backed log sink."""

from typing import TYPE_CHECKING, final

from gitlore.utils import create_logger

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


def _render(parts: tuple[object, ...]) -> str:
    return " ".join(str(part) for part in parts)


@final
class StructlogSink:
    """LogSink that forwards messages to a structlog logger.

    The message parts become the event, and the category and extra fields
    are bound as key/value pairs.
    """

    __slots__ = ("_logger",)

    def __init__(self, logger: "FilteringBoundLogger | None" = None) -> None:
        """Initialize the sink.

        Args:
            logger: Logger to write to. Defaults to a stderr text logger.
        """
        self._logger: FilteringBoundLogger = logger or create_logger()

    def info(self, category: str, *parts: object, **fields: object) -> None:
        self._logger.info(_render(parts), category=category, **fields)

    def warning(self, category: str, *parts: object, **fields: object) -> None:
        self._logger.warning(_render(parts), category=category, **fields)

    def error(self, category: str, *parts: object, **fields: object) -> None:
        self._logger.error(_render(parts), category=category, **fields)
