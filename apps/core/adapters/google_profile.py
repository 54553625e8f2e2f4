# apps/core/adapters/google_profile.py
import logging
from typing import Optional
from google.auth.exceptions import RefreshError
from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from apps.core.domain.entities import GoogleProfile

logger = logging.getLogger(__name__)


class GoogleProfileAdapter:
    def get_profile(self, creds: Credentials) -> Optional[GoogleProfile]:
        """Pobiera e-mail, imię i avatar z Google (userinfo)."""
        try:
            service = build('oauth2', 'v2', credentials=creds, cache_discovery=False)
            info = service.userinfo().get().execute()
        except RefreshError:
            logger.warning("Google API: token expired, re-login required")
            return None
        except HttpError as e:
            logger.warning("Google API error while fetching profile: %s", e)
            return None

        return GoogleProfile(
            email=info.get('email', ''),
            name=info.get('name', ''),
            avatar_url=info.get('picture', ''),
        )
