import logging
import os

from . import clients
from .dispatch import ClientException, api_handler
from .logging import handler_logging
from .receipts import Environment, build_receipt_request

APPSTORE_ENVIRONMENT = os.environ.get('APPSTORE_ENVIRONMENT', Environment.PRODUCTION)
APPSTORE_AUTO_FIX_DISABLED = os.environ.get('APPSTORE_AUTO_FIX_DISABLED')

logger = logging.getLogger()

secrets_manager_client = clients.SecretsManagerClient()
appstore_client = clients.AppStoreClient(
    environment=APPSTORE_ENVIRONMENT,
    auto_fix=not APPSTORE_AUTO_FIX_DISABLED,
)


@handler_logging
@api_handler
def verify_receipt(body):
    receipt_data = body.get('receiptData')
    if not receipt_data:
        raise ClientException('Body field `receiptData` is required')

    receipt_request = build_receipt_request(
        receipt_data,
        password=secrets_manager_client.get_appstore_params()['sharedSecret'],
        exclude_old_transactions=body.get('excludeOldTransactions'),
    )
    # purposely letting any app store client exceptions propogate up to top level so backend alerts fire
    _, resp = appstore_client.verify(receipt_request)
    return {
        'status': resp.status,
        'environment': resp.environment,
        'latestReceipt': resp.latest_receipt,
        'latestReceiptInfo': resp.latest_receipt_info,
        'pendingRenewalInfo': resp.pending_renewal_info,
    }
