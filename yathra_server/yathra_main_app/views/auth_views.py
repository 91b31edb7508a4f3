"""Exchange a Firebase ID token for API JWTs"""
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken

from ..authentication import user_for_identity
from ..utils.exceptions import ValidationFailure
from ..utils.firebase_auth import verify_firebase_token


class FirebaseLoginView(viewsets.ViewSet):
    permission_classes = [AllowAny]
    authentication_classes = []

    @action(detail=False, methods=['post'], url_path='firebase')
    def firebase(self, request):
        id_token = request.data.get('idToken')
        if not id_token:
            raise ValidationFailure('idToken is required')

        try:
            identity = verify_firebase_token(id_token)
        except ValueError as e:
            return Response({'error': str(e)}, status=401)

        user = user_for_identity(identity)
        return Response({'uid': user.username, **self.get_tokens_for_user(user)})

    def get_tokens_for_user(self, user):
        refresh = RefreshToken.for_user(user)
        return {
            'refresh': str(refresh),
            'access': str(refresh.access_token)
        }
