import pendulum
import requests
import urllib3

from storekit.exceptions import AppStoreConnectionError, AppStoreHttpError, AppStoreReadError

# upper bound on a single read, read1() hands back whatever has arrived so far
CHUNK_SIZE = 16 * 1024


class Transport:
    "Posts json request bodies to the App Store and hands back the raw response bytes"

    headers = {'Content-Type': 'application/json'}

    def __init__(self, session=None):
        self.session = session or requests.Session()

    def post(self, url, data, deadline=None):
        """
        POST `data` to `url`, return the full response body.

        `deadline` is an optional timezone-aware datetime. It bounds the whole call: the
        connect, the wait for headers and the body download, which is checked between reads.
        """
        assert deadline is None or deadline.tzinfo, f'Deadline `{deadline}` has no timezone info'
        timeout = self.remaining(url, deadline)
        try:
            resp = self.session.post(
                url,
                data=data,
                headers=self.headers,
                timeout=(timeout, timeout) if timeout else None,
                stream=True,
            )
        except (requests.exceptions.RequestException, ValueError) as err:
            raise AppStoreConnectionError(url, str(err)) from err

        with resp:
            if resp.status_code != 200:
                raise AppStoreHttpError(url, resp.status_code, resp.reason)
            return self.read_body(url, resp, deadline)

    def read_body(self, url, resp, deadline):
        chunks = []
        while True:
            self.remaining(url, deadline)
            try:
                chunk = resp.raw.read1(CHUNK_SIZE, decode_content=True)
            except urllib3.exceptions.ReadTimeoutError as err:
                raise AppStoreConnectionError(url, str(err)) from err
            except (urllib3.exceptions.HTTPError, OSError) as err:
                raise AppStoreReadError(url, str(err)) from err
            if not chunk:
                return b''.join(chunks)
            chunks.append(chunk)

    def remaining(self, url, deadline):
        "Seconds left until the caller's deadline, None for no deadline"
        if deadline is None:
            return None
        remaining = (deadline - pendulum.now('utc')).total_seconds()
        if remaining <= 0:
            raise AppStoreConnectionError(url, f'Deadline `{deadline.isoformat()}` exceeded')
        return remaining
