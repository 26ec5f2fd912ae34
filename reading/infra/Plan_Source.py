"""Plan data source: raw plan documents from a local directory or an HTTP base URL."""
import asyncio
import json
import logging
from pathlib import Path
from typing import Optional, Union

import httpx

from reading.domain.PlanType import PlanType
from reading.domain.errors import IngestError
from reading.infra.paths import PLAN_DATA_DIR, PLAN_FILES
from reading.utilities.config import PLAN_BASE_URL, PLAN_FETCH_TIMEOUT

logger = logging.getLogger(__name__)


class PlanSource:
    def __init__(self, data_dir: Union[str, Path] = PLAN_DATA_DIR, base_url: Optional[str] = PLAN_BASE_URL,
                 timeout: float = PLAN_FETCH_TIMEOUT, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.data_dir = Path(data_dir)
        self.base_url = (base_url or "").rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def location(self, plan_type) -> str:
        filename = PLAN_FILES[PlanType.parse(plan_type)]
        if self.base_url:
            return f"{self.base_url}/{filename}"
        return str(self.data_dir / filename)

    def _read_file(self, plan_type: PlanType):
        path = self.data_dir / PLAN_FILES[plan_type]
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except FileNotFoundError as e:
            raise IngestError(plan_type, f"plan file not found: {path}") from e
        except json.JSONDecodeError as e:
            raise IngestError(plan_type, f"invalid JSON in {path}: {e}") from e
        except OSError as e:
            raise IngestError(plan_type, f"could not read {path}: {e}") from e

    async def _fetch(self, plan_type: PlanType):
        url = self.location(plan_type)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            raise IngestError(plan_type, f"HTTP {e.response.status_code} from {url}") from e
        except httpx.HTTPError as e:
            raise IngestError(plan_type, f"could not fetch {url}: {e}") from e
        except ValueError as e:
            raise IngestError(plan_type, f"invalid JSON from {url}: {e}") from e

    async def load(self, plan_type):
        """Return the raw document for a plan type. Any failure raises IngestError."""
        plan_type = PlanType.parse(plan_type)
        logger.debug("Loading %s plan from %s", plan_type, self.location(plan_type))
        if self.base_url:
            return await self._fetch(plan_type)
        return await asyncio.to_thread(self._read_file, plan_type)
