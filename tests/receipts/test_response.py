import pytest

from storekit.exceptions import AppStoreDecodeError
from storekit.receipts import ReceiptResponse, parse_response
from storekit.receipts.response import strip_control_chars


def test_strip_control_chars():
    # C0, DEL and C1 controls all go
    assert strip_control_chars('a\x00b\tc\nd\re\x1f\x7ff\x85g\x9f') == 'abcdefg'
    assert strip_control_chars('a\x00b\x7fc\u0085d\u009fe') == 'abcde'
    assert strip_control_chars('\x00\x01\x7f\x80') == ''
    assert strip_control_chars('') == ''


def test_strip_control_chars_keeps_other_categories():
    # format (Cf), line separator (Zl), private use (Co) and non-ascii letters are not control chars
    assert strip_control_chars('a\u200bb\u2028c\ue000d\u00e9') == 'a\u200bb\u2028c\ue000d\u00e9'


def test_parse_response_success():
    resp = parse_response(b'{"status": 0, "environment": "Sandbox", "is-retryable": false}')
    assert resp.status == 0
    assert resp.environment == 'Sandbox'
    assert resp.is_retryable is False
    assert resp.receipt is None
    assert resp.latest_receipt is None


def test_parse_response_keeps_all_fields():
    data = {
        'status': 0,
        'receipt': {'bundle_id': 'app.real.mobile'},
        'latest_receipt': 'bGF0ZXN0',
        'latest_receipt_info': [{'original_transaction_id': '1000'}],
        'pending_renewal_info': [{'auto_renew_status': '1'}],
        'unknown-field': 42,
    }
    resp = parse_response(
        b'{"status": 0, "receipt": {"bundle_id": "app.real.mobile"}, "latest_receipt": "bGF0ZXN0",'
        b' "latest_receipt_info": [{"original_transaction_id": "1000"}],'
        b' "pending_renewal_info": [{"auto_renew_status": "1"}], "unknown-field": 42}'
    )
    assert resp == ReceiptResponse(data)
    assert resp.data == data
    assert resp.receipt == {'bundle_id': 'app.real.mobile'}
    assert resp.latest_receipt_info == [{'original_transaction_id': '1000'}]
    assert resp.pending_renewal_info == [{'auto_renew_status': '1'}]


def test_parse_response_strips_control_chars():
    resp = parse_response(b'{\n\t"status": 21007,\r\n "environment": "Sand\x01box"\x1b}')
    assert resp.status == 21007
    assert resp.environment == 'Sandbox'


def test_parse_response_strips_rather_than_escapes():
    # a raw newline inside a json string is invalid json, stripping it makes it valid
    resp = parse_response(b'{"status": 0, "latest_receipt": "abc\ndef"}')
    assert resp.latest_receipt == 'abcdef'


@pytest.mark.parametrize(
    'body',
    [
        b'',
        b'<html>Service Unavailable</html>',
        b'{"status": 0',
        b'[{"status": 0}]',
        b'"status"',
        b'{}',
        b'{"status": "0"}',
        b'{"status": true}',
        b'{"status": null}',
    ],
)
def test_parse_response_failures(body):
    with pytest.raises(AppStoreDecodeError, match='Could not decode App Store response') as exc_info:
        parse_response(body)
    assert exc_info.value.body == body


def test_parse_response_strips_del_and_c1_controls():
    resp = parse_response('{"status"\x7f: 21008, "environment": "Pro\u0085duc\u009ftion"}'.encode('utf-8'))
    assert resp.status == 21008
    assert resp.environment == 'Production'


def test_parse_response_invalid_utf8_is_replaced():
    resp = parse_response(b'{"status": 0, "latest_receipt": "ab\xffcd"}')
    assert resp.latest_receipt == 'ab\ufffdcd'
