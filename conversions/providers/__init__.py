from django.conf import settings

from .meta import MetaCAPI
from .reddit import RedditCAPI


def get_providers():
    providers = []
    if getattr(settings, "FACEBOOK_PIXEL_ID", None):
        providers.append(MetaCAPI(pixel_id=settings.FACEBOOK_PIXEL_ID))
    if getattr(settings, "REDDIT_AD_ACCOUNT_ID", None):
        providers.append(RedditCAPI(ad_account_id=settings.REDDIT_AD_ACCOUNT_ID))
    return providers
