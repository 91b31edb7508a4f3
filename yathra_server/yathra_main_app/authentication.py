"""DRF authentication backed by Firebase ID tokens"""
import base64
import json
import logging

from django.contrib.auth.models import User
from rest_framework import authentication, exceptions

from .models import Profile
from .utils.constants import UserRole
from .utils.firebase_auth import verify_firebase_token

logger = logging.getLogger(__name__)


def user_for_identity(identity):
    """Django user for a verified Firebase identity, created on first sight"""
    user, created = User.objects.get_or_create(
        username=identity['uid'],
        defaults={'email': identity.get('email') or ''},
    )
    if created:
        Profile.objects.create(user=user, email=user.email, role=UserRole.PASSENGER)
        logger.info(f'[AUTH] Created user for Firebase uid {user.username}')
    return user


def _is_firebase_token(token):
    # Firebase ID tokens are RS256 and name their signing key; simplejwt tokens do neither
    try:
        segment = token.split('.')[0]
        header = json.loads(base64.urlsafe_b64decode(segment + '=' * (-len(segment) % 4)))
    except ValueError:
        return False
    return isinstance(header, dict) and header.get('alg') == 'RS256' and 'kid' in header


class FirebaseAuthentication(authentication.BaseAuthentication):
    """
    Authorization: Bearer <Firebase ID token>

    Other bearer tokens are left to the next authentication class.
    """
    keyword = 'Bearer'

    def authenticate(self, request):
        header = authentication.get_authorization_header(request).split()
        if not header or header[0].decode().lower() != self.keyword.lower():
            return None
        if len(header) != 2:
            raise exceptions.AuthenticationFailed('Invalid authorization header')

        token = header[1].decode()
        if not _is_firebase_token(token):
            return None

        try:
            identity = verify_firebase_token(token)
        except ValueError as e:
            raise exceptions.AuthenticationFailed(str(e))

        return user_for_identity(identity), identity

    def authenticate_header(self, request):
        return self.keyword
