# apps/core/adapters/orm_repositories.py
from typing import Optional
from django.contrib.auth.models import User
from django.db import IntegrityError, transaction
from google.oauth2.credentials import Credentials
from apps.core.domain.entities import UserEntity
from apps.core.models import GoogleCredentials
from apps.core.ports.repositories import IUserRepository, UsernameAlreadyExists


class DjangoUserRepository(IUserRepository):
    def to_entity(self, model: User) -> UserEntity:
        """Konwertuje Model Django (User + profil) -> Czystą Encję."""
        profile = model.profile
        return UserEntity(
            id=model.id,
            username=model.username,
            name=profile.name,
            bio=profile.bio,
            avatar_url=profile.avatar_url,
        )

    def get_by_username(self, username: str) -> Optional[UserEntity]:
        try:
            user = User.objects.select_related('profile').get(username=username)
            return self.to_entity(user)
        except User.DoesNotExist:
            return None

    def username_exists(self, username: str) -> bool:
        return User.objects.filter(username=username).exists()

    def create(self, user: UserEntity) -> UserEntity:
        try:
            with transaction.atomic():
                obj = User.objects.create_user(username=user.username)
                # Profil tworzy sygnał post_save, tu tylko go uzupełniamy
                profile = obj.profile
                profile.name = user.name
                profile.save()
        except IntegrityError:
            # Ktoś zajął nazwę między sprawdzeniem a zapisem
            raise UsernameAlreadyExists("Username already exists")
        return self.to_entity(obj)


class GoogleCredentialsRepository:
    def save(self, user_id: int, creds: Credentials) -> GoogleCredentials:
        obj, _ = GoogleCredentials.objects.update_or_create(
            user_id=user_id,
            defaults={
                'token': creds.token,
                'refresh_token': creds.refresh_token,
                'token_uri': creds.token_uri,
                'client_id': creds.client_id,
                'client_secret': creds.client_secret,
                'scopes': ' '.join(creds.scopes or [])
            }
        )
        return obj

    def exists_for_user(self, user_id: int) -> bool:
        return GoogleCredentials.objects.filter(user_id=user_id).exists()

    def to_credentials(self, user_id: int) -> Optional[Credentials]:
        """Buduje obiekt Credentials (z biblioteki google) z tokenów w bazie."""
        try:
            creds_db = GoogleCredentials.objects.get(user_id=user_id)
        except GoogleCredentials.DoesNotExist:
            return None

        return Credentials(
            token=creds_db.token,
            refresh_token=creds_db.refresh_token,
            token_uri=creds_db.token_uri,
            client_id=creds_db.client_id,
            client_secret=creds_db.client_secret,
            scopes=creds_db.scopes.split()
        )
