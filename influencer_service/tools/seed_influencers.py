"""
Seeding script
--------------

Purpose:
- Insert a few sample influencers into MongoDB so the listing, quick-find
  and detail endpoints have something to return during development.

How to use:
1) Ensure env vars: MONGO_URI, DB_NAME, INFLUENCERS_COLLECTION (all optional)
2) Run:
   python -m influencer_service.tools.seed_influencers
3) Browse:
   GET /influencers?label=artist
"""
import logging
from typing import List

from influencer_service.application.services.influencer_service import InfluencerService
from influencer_service.core.logging_config import configure_logging
from influencer_service.di.container import get_container
from influencer_service.domain.models.influencer import InfluencerData

logger = logging.getLogger(__name__)


def build_sample_influencers() -> List[InfluencerData]:
    """Sample records covering both genders, several labels and socials."""
    return [
        InfluencerData(
            name="Raisa Andriana",
            bio="Singer and songwriter",
            avatar="https://cdn.example.com/avatars/raisa.jpg",
            nationality="Indonesia",
            gender="f",
            socials={"instagram": "raisa6690", "twitter": "raisa6690"},
            label=["artist", "musician"],
        ),
        InfluencerData(
            name="Deddy Corbuzier",
            bio="Podcaster and former magician",
            avatar="https://cdn.example.com/avatars/deddy.jpg",
            nationality="Indonesia",
            gender="m",
            socials={"youtube": "corbuzier", "instagram": "mastercorbuzier"},
            label=["podcaster", "entertainer"],
        ),
        InfluencerData(
            name="Najwa Shihab",
            bio="Journalist and TV presenter",
            avatar="https://cdn.example.com/avatars/najwa.jpg",
            nationality="Indonesia",
            gender="f",
            socials={"instagram": "najwashihab"},
            label=["journalist"],
        ),
        InfluencerData(
            name="Jerome Polin",
            bio="Math educator living in Japan",
            avatar="https://cdn.example.com/avatars/jerome.jpg",
            nationality="Indonesia",
            gender="m",
            socials={"youtube": "nihongomantappu"},
            label=["educator", "vlogger"],
        ),
    ]


def seed(service: InfluencerService) -> List[str]:
    """Create every sample influencer and return the new ids."""
    return [service.create_influencer(data).id for data in build_sample_influencers()]


def main() -> None:
    configure_logging()
    container = get_container()
    mongo_client = container.get("mongo_client")
    mongo_client.connect()
    try:
        ids = seed(container.get(InfluencerService))
    finally:
        mongo_client.close()

    logger.info(f"Inserted {len(ids)} sample influencers:")
    for influencer_id in ids:
        logger.info(f" - {influencer_id}")


if __name__ == "__main__":
    main()
