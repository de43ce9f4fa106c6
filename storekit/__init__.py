__all__ = [
    'AppStoreClient',
    'Environment',
    'ReceiptResponse',
    'ReceiptStatus',
    'Transport',
    'build_receipt_request',
]
from .clients import AppStoreClient, Transport
from .receipts import Environment, ReceiptResponse, ReceiptStatus, build_receipt_request
