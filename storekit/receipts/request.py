def build_receipt_request(receipt_data, password=None, exclude_old_transactions=None):
    """
    Build the request body apple's verifyReceipt endpoint expects.

    `receipt_data` is the base64 encoded receipt, `password` the app's shared secret
    (only needed for auto-renewable subscriptions). Unset optional keys are left out.
    https://developer.apple.com/documentation/appstorereceipts/requestbody
    """
    req_body = {'receipt-data': receipt_data}
    if password is not None:
        req_body['password'] = password
    if exclude_old_transactions is not None:
        req_body['exclude-old-transactions'] = exclude_old_transactions
    return req_body
