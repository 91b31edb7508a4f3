"""Firebase identity verification"""
import logging
import os

import firebase_admin
from firebase_admin import auth, credentials, initialize_app

logger = logging.getLogger(__name__)


def _credentials_from_env():
    cred_path = os.getenv('FIREBASE_CREDENTIALS_PATH')
    if cred_path and os.path.exists(cred_path):
        return credentials.Certificate(cred_path)

    project_id = os.getenv('FIREBASE_PROJECT_ID')
    if not project_id:
        return None

    client_email = os.getenv('FIREBASE_CLIENT_EMAIL')
    return credentials.Certificate({
        'type': 'service_account',
        'project_id': project_id,
        'private_key_id': os.getenv('FIREBASE_PRIVATE_KEY_ID'),
        'private_key': os.getenv('FIREBASE_PRIVATE_KEY', '').replace('\\n', '\n'),
        'client_email': client_email,
        'client_id': os.getenv('FIREBASE_CLIENT_ID'),
        'auth_uri': 'https://accounts.google.com/o/oauth2/auth',
        'token_uri': 'https://oauth2.googleapis.com/token',
        'auth_provider_x509_cert_url': 'https://www.googleapis.com/oauth2/v1/certs',
        'client_x509_cert_url': f'https://www.googleapis.com/robot/v1/metadata/x509/{client_email}',
    })


def initialize_firebase():
    if not firebase_admin._apps:
        cred = _credentials_from_env()
        if cred:
            initialize_app(cred)
        else:
            # Application default credentials
            initialize_app()


def verify_firebase_token(id_token: str) -> dict:
    """Verify a Firebase ID token and return the caller's identity"""
    try:
        initialize_firebase()
        decoded_token = auth.verify_id_token(id_token)
    except (ValueError, auth.InvalidIdTokenError, auth.ExpiredIdTokenError,
            auth.RevokedIdTokenError, auth.CertificateFetchError) as e:
        logger.info(f'[AUTH] Rejected Firebase token: {e}')
        raise ValueError(f'Invalid Firebase token: {str(e)}')

    return {
        'uid': decoded_token.get('uid'),
        'email': decoded_token.get('email', ''),
    }
