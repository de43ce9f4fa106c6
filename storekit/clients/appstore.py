# https://developer.apple.com/documentation/appstorereceipts/verifyreceipt
import json
import logging

from storekit.exceptions import AppStoreSerializationError
from storekit.logging import LogLevelContext
from storekit.receipts import Environment, ReceiptStatus, parse_response

from .transport import Transport

logger = logging.getLogger()


class AppStoreClient:
    """
    Verifies receipts with apple's verifyReceipt endpoint.

    Defaults to the production environment with environment auto fix enabled. When
    auto fix is on and apple answers that the receipt belongs to the other environment
    (status 21007 or 21008), the request is re-sent to the other environment's url,
    at most once per call. The configured environment itself never changes.

    Configuration is not synchronized: finish configuring before sharing the client
    between threads.
    """

    def __init__(self, environment=Environment.PRODUCTION, auto_fix=True, transport=None):
        assert environment in Environment._ALL, f'Unknown App Store environment `{environment}`'
        self.environment = environment
        self.auto_fix = auto_fix
        self.transport = transport or Transport()

    def on_sandbox(self):
        self.environment = Environment.SANDBOX
        return self

    def on_production(self):
        self.environment = Environment.PRODUCTION
        return self

    def without_auto_fix(self):
        self.auto_fix = False
        return self

    @property
    def url(self):
        return Environment.url(self.environment)

    def verify(self, receipt_request, deadline=None):
        """
        Verify the receipt request, returning a tuple of (raw response body, ReceiptResponse).

        `deadline` is an optional timezone-aware datetime. It bounds both network calls, body
        downloads included.
        Raises a subclass of AppStoreException on any failure. Decode errors carry the
        raw body as `err.body`.
        """
        assert deadline is None or deadline.tzinfo, f'Deadline `{deadline}` has no timezone info'
        try:
            data = json.dumps(receipt_request).encode('utf-8')
        except (TypeError, ValueError) as err:
            raise AppStoreSerializationError(str(err)) from err

        body, resp = self.query_store(data, self.url, deadline)

        if self.auto_fix:
            resend_url = self.resend_url(resp)
            if resend_url:
                with LogLevelContext(logger, logging.INFO):
                    logger.info(
                        f'App Store receipt sent to wrong environment, resending to `{resend_url}`',
                        extra={'status': resp.status, 'url': resend_url},
                    )
                body, resp = self.query_store(data, resend_url, deadline)

        return body, resp

    def query_store(self, data, url, deadline):
        body = self.transport.post(url, data, deadline=deadline)
        return body, parse_response(body)

    def resend_url(self, resp):
        "Url of the other environment if apple says the receipt belongs there, else None"
        if (
            resp.status == ReceiptStatus.SANDBOX_RECEIPT_SENT_TO_PRODUCTION
            and self.environment == Environment.PRODUCTION
        ):
            return Environment.url(Environment.SANDBOX)
        if (
            resp.status == ReceiptStatus.PRODUCTION_RECEIPT_SENT_TO_SANDBOX
            and self.environment == Environment.SANDBOX
        ):
            return Environment.url(Environment.PRODUCTION)
        return None
