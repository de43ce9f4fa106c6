import functools
import json
import logging

from .logging import LogLevelContext

logger = logging.getLogger()


class ClientException(Exception):
    "Any error attributable to the api client, returned to them as a 400"
    pass


def api_handler(func):
    """
    Decorator for api gateway proxy handlers.

    The wrapped function receives the request's json body (always a dict) and returns
    data to be sent back as a json 200 response. Raise ClientException for a 400.
    Anything else propagates.
    """

    @functools.wraps(func)
    def inner(event, context):
        with LogLevelContext(logger, logging.INFO):
            logger.info(f'Handling `{func.__name__}` event', extra={'event': event})

        try:
            data = func(parse_body(event))
        except ClientException as err:
            return response(400, {'message': str(err)})
        return response(200, data)

    return inner


def parse_body(event):
    try:
        body = json.loads(event.get('body') or '{}')
    except ValueError as err:
        raise ClientException(f'Request body is not valid json: {err}') from err
    if not isinstance(body, dict):
        raise ClientException('Request body must be a json object')
    return body


def response(status_code, data):
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': 'application/json'},
        'body': json.dumps(data),
    }
