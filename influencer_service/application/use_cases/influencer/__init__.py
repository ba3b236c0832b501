from .list_influencers import ListInfluencersUseCase
from .create_influencer import CreateInfluencerUseCase
from .update_influencer import UpdateInfluencerUseCase

__all__ = [
    "ListInfluencersUseCase",
    "CreateInfluencerUseCase",
    "UpdateInfluencerUseCase",
]
