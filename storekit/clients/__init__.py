__all__ = [
    'AppStoreClient',
    'SecretsManagerClient',
    'Transport',
]
from .appstore import AppStoreClient
from .secretsmanager import SecretsManagerClient
from .transport import Transport
