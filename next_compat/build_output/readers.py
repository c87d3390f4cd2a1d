import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from anyio import to_thread

from next_compat.utils import read_json_strict

logger = logging.getLogger(__name__)


class IDocumentReader(ABC):
    @abstractmethod
    async def read_json(self, path: Path) -> Any:
        raise NotImplementedError


class JsonDocumentReader(IDocumentReader):
    """Read build output JSON in an anyio worker thread."""

    async def read_json(self, path: Path) -> Any:
        logger.debug("reading build artifact %s", path)
        return await to_thread.run_sync(read_json_strict, path)
