#
#
#

from octodns.provider import ProviderException


class UltraDnsClientException(ProviderException):
    pass


class UltraDnsClientUnauthorized(UltraDnsClientException):
    def __init__(self):
        super().__init__('Unauthorized')


class UltraDnsClientFault(UltraDnsClientException):
    """A SOAP fault returned by the UltraDNS web service."""

    def __init__(self, code, description=None):
        self.code = code
        self.description = description
        msg = f'UltraDNS fault {code}'
        if description:
            msg = f'{msg}: {description}'
        super().__init__(msg)


class UltraDnsClientNotFound(UltraDnsClientFault):
    def __init__(self, code=-1, description='Not Found'):
        super().__init__(code, description)


class UltraDnsClientAlreadyExists(UltraDnsClientFault):
    def __init__(self, code=-1, description='Already Exists'):
        super().__init__(code, description)
