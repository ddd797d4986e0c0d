"""Service for end-to-end transcript extraction."""

from typing import Callable, List, Optional

from ..core.config import Config, config as default_config
from ..core.exceptions import InvalidVideoInputError, TranscriptUnavailableError
from ..core.fallback import Attempt, run_attempts
from ..core.proxy_client import ProxyClient
from ..core.transcript_fetcher import fetch_direct, fetch_from_page
from ..models import TranscriptItem
from ..utils.logging import get_logger
from ..utils.youtube_utils import extract_video_id

logger = get_logger("transcript_service")


class TranscriptService:
    """
    Extracts a video's transcript from a URL or bare video ID.

    Each call opens its own proxy client and shares no state with other
    calls, so concurrent extractions do not interfere.
    """

    def __init__(
        self,
        client_factory: Optional[Callable[[], ProxyClient]] = None,
        config: Optional[Config] = None
    ):
        self.config = config or default_config
        self.client_factory = client_factory or self._default_client
        logger.info("Initialized TranscriptService")

    def _default_client(self) -> ProxyClient:
        network = self.config.network
        return ProxyClient(
            proxy_base=network.proxy_base_url,
            timeout_total=network.http_timeout_total,
            timeout_connect=network.http_timeout_connect,
            user_agent=network.user_agent
        )

    async def extract_transcript(self, url_or_id: str) -> List[TranscriptItem]:
        """
        Extract the transcript for a video.

        The page path is tried first; the direct timedtext probe runs if it
        finds nothing or fails. Cancelling the awaiting task aborts the fetch
        in flight.

        Args:
            url_or_id: YouTube URL in any supported form, or an 11-character video ID

        Returns:
            Time-ordered transcript cues (never empty)

        Raises:
            InvalidVideoInputError: if no video ID can be extracted
            TranscriptUnavailableError: if no path produced captions
            TranscriptError: the page path's error, when it failed and the
                direct probe found nothing either
        """
        video_id = extract_video_id(url_or_id)
        if not video_id:
            raise InvalidVideoInputError()

        logger.info(f"Extracting transcript for {video_id}")
        languages = self.config.extraction.fallback_languages

        async with self.client_factory() as client:

            async def direct_probe() -> List[TranscriptItem]:
                try:
                    return await fetch_direct(client, video_id, languages)
                except TranscriptUnavailableError:
                    return []

            return await run_attempts([
                Attempt("page captions", lambda: fetch_from_page(client, video_id)),
                Attempt("direct timedtext", direct_probe),
            ])


async def extract_transcript(url_or_id: str) -> List[TranscriptItem]:
    """Extract a transcript using the default configuration."""
    return await TranscriptService().extract_transcript(url_or_id)
