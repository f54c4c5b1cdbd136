"""
Expire stale games.

Run this job periodically to have the backend drop abandoned matches.
"""

import asyncio
import logging

from chronosclient.client import ChronosClient

logger = logging.getLogger(__name__)


async def run_expire(client: ChronosClient | None = None) -> None:
    """Ask the backend to expire stale games."""
    client = client or ChronosClient()
    logger.info("Expiring stale games on %s...", client.base_url)

    try:
        await client.games.expire_games()
        logger.info("Expire request accepted")
    except Exception as e:
        logger.error("Failed to expire games: %s", e)
        raise


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(run_expire())


if __name__ == "__main__":
    main()
