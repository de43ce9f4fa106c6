import json
import unicodedata

from storekit.exceptions import AppStoreDecodeError


def strip_control_chars(text):
    "Remove (not replace, not escape) every unicode control character"
    return ''.join(ch for ch in text if unicodedata.category(ch) != 'Cc')


def parse_response(body):
    """
    Decode the raw bytes apple sent back into a ReceiptResponse.

    Control characters are stripped before decoding, apple has been seen embedding them.
    A body without an integer `status` is an AppStoreDecodeError. Decoding into a struct
    with zero-value defaults would read `{}` or `{"status": null}` as status 0, which
    looks like a valid receipt.
    """
    text = strip_control_chars(body.decode('utf-8', errors='replace'))
    try:
        data = json.loads(text)
    except ValueError as err:
        raise AppStoreDecodeError(body, str(err)) from err

    if not isinstance(data, dict):
        raise AppStoreDecodeError(body, f'Expected a json object, got `{type(data).__name__}`')
    status = data.get('status')
    # bool is an int subclass, but never a valid status
    if not isinstance(status, int) or isinstance(status, bool):
        raise AppStoreDecodeError(body, f'Missing or non-integer status `{status}`')
    return ReceiptResponse(data)


class ReceiptResponse:
    "Thin read-only wrapper around the decoded verifyReceipt response body"

    def __init__(self, data):
        self.data = data

    def __repr__(self):
        return f'ReceiptResponse(status={self.status})'

    def __eq__(self, other):
        return isinstance(other, ReceiptResponse) and self.data == other.data

    @property
    def status(self):
        return self.data['status']

    # https://developer.apple.com/documentation/appstorereceipts/responsebody

    @property
    def environment(self):
        return self.data.get('environment')

    @property
    def is_retryable(self):
        return self.data.get('is-retryable')

    @property
    def receipt(self):
        return self.data.get('receipt')

    @property
    def latest_receipt(self):
        return self.data.get('latest_receipt')

    @property
    def latest_receipt_info(self):
        return self.data.get('latest_receipt_info')

    @property
    def pending_renewal_info(self):
        return self.data.get('pending_renewal_info')
