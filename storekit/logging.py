import functools
import json
import logging

# attributes every LogRecord carries, anything else on a record came in through `extra`
STANDARD_RECORD_ATTRS = frozenset(vars(logging.LogRecord('', 0, '', 0, '', None, None))) | {'message', 'asctime'}


def handler_logging(func):
    "Lambda handler decorator: json log formatting, and uncaught errors logged with their event"

    # lambda installs a handler on the root logger before our code is imported
    logger = logging.getLogger()
    for log_handler in logger.handlers:
        log_handler.setFormatter(CloudWatchFormatter())

    @functools.wraps(func)
    def wrapper(event, context):
        try:
            return func(event, context)
        except Exception as err:
            # re-raised so the invocation counts as failed for lambda's `Errors` metric
            logger.exception(str(err), extra={'event': event})
            raise

    return wrapper


# https://docs.python.org/3/howto/logging-cookbook.html#using-a-context-manager-for-selective-logging
class LogLevelContext:
    def __init__(self, logger, level):
        self.logger = logger
        self.level = level

    def __enter__(self):
        self.old_level = self.logger.level
        self.logger.setLevel(self.level)

    def __exit__(self, et, ev, tb):
        self.logger.setLevel(self.old_level)


class CloudWatchFormatter(logging.Formatter):
    """
    One line per record: `LEVEL RequestId: <id> Data: <json>`.

    The json holds the message, source location, any `extra` values passed to the log
    call, and the traceback split into lines so CloudWatch Insights can query it.
    """

    lambda_task_root = '/var/task/'

    def format(self, record):
        # lambda stamps aws_request_id on records, absent outside of lambda
        request_id = getattr(record, 'aws_request_id', None)
        data = {
            'message': record.getMessage(),
            'level': record.levelname,
            'requestId': request_id,
            'sourceFile': self.source_file(record.pathname),
            'sourceLine': record.lineno,
        }
        data.update(self.extras(record))

        if record.exc_info:
            if not record.exc_text:
                record.exc_text = self.formatException(record.exc_info)
            data['exceptionInfo'] = record.exc_text.split('\n')
        if record.stack_info:
            data['stackInfo'] = record.stack_info.split('\n')
        return f'{record.levelname} RequestId: {request_id} Data: {json.dumps(data, default=str)}'

    def source_file(self, pathname):
        if pathname.startswith(self.lambda_task_root):
            return pathname[len(self.lambda_task_root):]
        return pathname

    def extras(self, record):
        return {
            key: value
            for key, value in vars(record).items()
            if key not in STANDARD_RECORD_ATTRS and key != 'aws_request_id'
        }
