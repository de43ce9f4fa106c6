class AppStoreException(Exception):
    "Any error raised while verifying a receipt with the App Store"
    pass


class AppStoreSerializationError(AppStoreException):
    def __init__(self, message):
        self.message = message
        super().__init__(message)

    def __str__(self):
        return f'Could not serialize receipt request: {self.message}'


class AppStoreConnectionError(AppStoreException):
    def __init__(self, url, message):
        self.url = url
        self.message = message
        super().__init__(url, message)

    def __str__(self):
        return f'Could not connect to App Store server `{self.url}`: {self.message}'


class AppStoreHttpError(AppStoreException):
    def __init__(self, url, status_code, reason):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        super().__init__(url, status_code, reason)

    def __str__(self):
        return f'App Store http error (`{self.status_code} {self.reason}`) from `{self.url}`'


class AppStoreReadError(AppStoreException):
    def __init__(self, url, message):
        self.url = url
        self.message = message
        super().__init__(url, message)

    def __str__(self):
        return f'Could not read App Store response from `{self.url}`: {self.message}'


class AppStoreDecodeError(AppStoreException):
    "The raw response body is kept on the error for diagnostics"

    def __init__(self, body, message):
        self.body = body
        self.message = message
        super().__init__(body, message)

    def __str__(self):
        return f'Could not decode App Store response: {self.message}'
