#
#
#

import logging

from requests import Session

from octodns import __VERSION__ as octodns_version

from . import __version__ as package_version
from . import soap
from .exceptions import UltraDnsClientUnauthorized


class UltraDnsWsClient(object):
    BASE_URL = 'https://ultra-api.ultradns.com:8443/UltraDNS_WS/v01'
    DEFAULT_TIMEOUT = 30

    def __init__(
        self, username, password, base_url=None, timeout=DEFAULT_TIMEOUT
    ):
        self.log = logging.getLogger(f'UltraDnsWsClient[{username}]')
        self.log.debug(
            '__init__: username=%s, password=***, base_url=%s, timeout=%s',
            username,
            base_url,
            timeout,
        )
        session = Session()
        session.headers.update(
            {
                'Content-Type': 'text/xml; charset=utf-8',
                'User-Agent': f'octodns/{octodns_version} octodns-ultradns/{package_version}',
            }
        )
        self._session = session
        self._username = username
        self._password = password
        self.base_url = base_url or self.BASE_URL
        self.timeout = timeout

    def _do(self, method, **params):
        data = soap.envelope(self._username, self._password, method, params)
        response = self._session.request(
            'POST',
            self.base_url,
            data=data,
            headers={'SOAPAction': ''},
            timeout=self.timeout,
        )
        if response.status_code in (401, 403):
            raise UltraDnsClientUnauthorized()
        # faults come back as 500s with a parseable envelope
        if response.status_code == 500 and response.content:
            root = soap.parse(response.content)
            fault = soap.fault(root)
            if fault is not None:
                code, description = fault
                self.log.debug(
                    '_do: method=%s, fault code=%s, description=%s',
                    method,
                    code,
                    description,
                )
                raise soap.exception_for_fault(code, description)
        response.raise_for_status()
        return soap.parse(response.content)

    def call(self, method, **params):
        """Invoke method and return its ``<methodResponse>`` element."""
        return soap.response_body(self._do(method, **params))
