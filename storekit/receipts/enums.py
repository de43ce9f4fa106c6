# https://developer.apple.com/documentation/appstorereceipts/verifyreceipt
SANDBOX_URL = 'https://sandbox.itunes.apple.com/verifyReceipt'
PRODUCTION_URL = 'https://buy.itunes.apple.com/verifyReceipt'


class Environment:
    # values match the `environment` field apple returns in its responses
    SANDBOX = 'Sandbox'
    PRODUCTION = 'Production'

    _ALL = (SANDBOX, PRODUCTION)

    _URLS = {
        SANDBOX: SANDBOX_URL,
        PRODUCTION: PRODUCTION_URL,
    }

    @classmethod
    def url(cls, environment):
        return cls._URLS[environment]


# https://developer.apple.com/documentation/appstorereceipts/status
class ReceiptStatus:
    OK = 0
    NOT_A_POST = 21000
    MALFORMED_DATA_OR_SERVICE_ISSUE = 21002
    RECEIPT_AUTHENTICATION_FAILED = 21003
    INVALID_SHARED_SECRET = 21004
    SERVICE_UNAVAILABLE = 21005
    # only returned for iOS 6-style transaction receipts for auto-renewable subscriptions
    SUBSCRIPTION_EXPIRED = 21006
    SANDBOX_RECEIPT_SENT_TO_PRODUCTION = 21007
    PRODUCTION_RECEIPT_SENT_TO_SANDBOX = 21008
    INTERNAL_SERVICE_ERROR = 21009
    USER_ACCOUNT_NOT_FOUND = 21010

    _ALL = (
        OK,
        NOT_A_POST,
        MALFORMED_DATA_OR_SERVICE_ISSUE,
        RECEIPT_AUTHENTICATION_FAILED,
        INVALID_SHARED_SECRET,
        SERVICE_UNAVAILABLE,
        SUBSCRIPTION_EXPIRED,
        SANDBOX_RECEIPT_SENT_TO_PRODUCTION,
        PRODUCTION_RECEIPT_SENT_TO_SANDBOX,
        INTERNAL_SERVICE_ERROR,
        USER_ACCOUNT_NOT_FOUND,
    )

    # internal data access errors, apple flags some of these with `is-retryable`
    INTERNAL_ERROR_RANGE = range(21100, 21200)

    @classmethod
    def is_internal_error(cls, status):
        return status in cls.INTERNAL_ERROR_RANGE
