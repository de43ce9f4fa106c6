__all__ = [
    'Environment',
    'ReceiptResponse',
    'ReceiptStatus',
    'build_receipt_request',
    'parse_response',
]
from .enums import Environment, ReceiptStatus
from .request import build_receipt_request
from .response import ReceiptResponse, parse_response
