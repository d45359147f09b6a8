"""
Downloads badge photos from their public URLs.
"""

import asyncio
import logging
from typing import Dict, Iterable, Optional

import aiohttp

logger = logging.getLogger(__name__)


class PhotoFetcher:
    """Fetches public photo URLs; a missing photo never fails a badge"""

    def __init__(self, timeout_seconds: float = 10.0, max_concurrent: int = 8):
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._max_concurrent = max_concurrent

    async def fetch_many(self, urls: Iterable[Optional[str]]) -> Dict[str, bytes]:
        """Download every distinct URL over one session; failures are left out"""
        unique = list(dict.fromkeys(u for u in urls if u))
        if not unique:
            return {}

        semaphore = asyncio.Semaphore(self._max_concurrent)

        async def limited(session: aiohttp.ClientSession, url: str) -> Optional[bytes]:
            async with semaphore:
                return await self._download(session, url)

        async with aiohttp.ClientSession(timeout=self._timeout) as session:
            results = await asyncio.gather(*(limited(session, url) for url in unique))

        photos = {url: data for url, data in zip(unique, results) if data}
        logger.info(f"[PHOTO] Downloaded {len(photos)}/{len(unique)} photos")
        return photos

    async def _download(self, session: aiohttp.ClientSession, url: str) -> Optional[bytes]:
        try:
            async with session.get(url) as response:
                if response.status == 200:
                    return await response.read()
                logger.warning(f"[PHOTO] {url} answered {response.status}")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"[PHOTO] Download failed for {url}: {e}")
        return None
