#
#
#

"""SOAP envelope encoding and response/fault decoding for UltraDNS WS v01."""

from typing import Dict, Iterator, Optional, Tuple
from xml.etree import ElementTree as ET

from .exceptions import (
    UltraDnsClientAlreadyExists,
    UltraDnsClientException,
    UltraDnsClientFault,
    UltraDnsClientNotFound,
)

SOAPENV_NS = 'http://schemas.xmlsoap.org/soap/envelope/'
V01_NS = 'http://webservice.api.ultra.neustar.com/v01/'
WSSE_NS = (
    'http://docs.oasis-open.org/wss/2004/01/'
    'oasis-200401-wss-wssecurity-secext-1.0.xsd'
)
PASSWORD_TEXT = (
    'http://docs.oasis-open.org/wss/2004/01/'
    'oasis-200401-wss-username-token-profile-1.0#PasswordText'
)

ET.register_namespace('soapenv', SOAPENV_NS)
ET.register_namespace('v01', V01_NS)
ET.register_namespace('wsse', WSSE_NS)

UNKNOWN_CODE = -1

# UltraDNS error codes and the kind of failure they signal
NOT_FOUND_CODES = {
    1801: 'zone not found',
    2103: 'resource record not found',
    2142: 'no pool or multiple pools for the hostname',
    2401: 'account not found',
    2911: 'pool not found',
    3101: 'pool record not found',
}
ALREADY_EXISTS_CODES = {
    1802: 'zone already exists',
    2111: 'resource record already exists',
    2912: 'pool already exists',
    4009: 'pool record already exists',
}


def local_name(tag: str) -> str:
    return tag.rsplit('}', 1)[-1]


def find_all(elem: ET.Element, name: str) -> Iterator[ET.Element]:
    """Descendants of elem whose tag matches name, ignoring namespaces."""
    for child in elem.iter():
        if child is not elem and local_name(child.tag) == name:
            yield child


def find(elem: ET.Element, name: str) -> Optional[ET.Element]:
    return next(find_all(elem, name), None)


def find_text(elem: ET.Element, name: str) -> Optional[str]:
    found = find(elem, name)
    if found is None or found.text is None:
        return None
    return found.text.strip()


def _text(value) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def envelope(username: str, password: str, method: str, params: Dict) -> bytes:
    """Build a request envelope for method.

    Each entry of params becomes an unqualified child element of the method
    element, in order. ``None`` values produce empty elements, which the
    service reads as "not set".
    """
    root = ET.Element(f'{{{SOAPENV_NS}}}Envelope')
    header = ET.SubElement(root, f'{{{SOAPENV_NS}}}Header')
    security = ET.SubElement(
        header,
        f'{{{WSSE_NS}}}Security',
        {f'{{{SOAPENV_NS}}}mustUnderstand': '1'},
    )
    token = ET.SubElement(security, f'{{{WSSE_NS}}}UsernameToken')
    ET.SubElement(token, f'{{{WSSE_NS}}}Username').text = username
    ET.SubElement(
        token, f'{{{WSSE_NS}}}Password', {'Type': PASSWORD_TEXT}
    ).text = password

    body = ET.SubElement(root, f'{{{SOAPENV_NS}}}Body')
    call = ET.SubElement(body, f'{{{V01_NS}}}{method}')
    for name, value in params.items():
        ET.SubElement(call, name).text = _text(value)

    return ET.tostring(root, encoding='utf-8', xml_declaration=True)


def parse(content: bytes) -> ET.Element:
    try:
        return ET.fromstring(content)
    except ET.ParseError as e:
        raise UltraDnsClientException(f'Invalid SOAP response: {e}') from e


def response_body(root: ET.Element) -> ET.Element:
    """The ``<methodResponse>`` element of a successful response."""
    body = find(root, 'Body')
    if body is None or len(body) == 0:
        raise UltraDnsClientException('SOAP response has no body')
    return body[0]


def fault(root: ET.Element) -> Optional[Tuple[int, Optional[str]]]:
    """Returns (code, description) when root carries a SOAP fault."""
    elem = find(root, 'Fault')
    if elem is None:
        return None
    description = find_text(elem, 'errorDescription') or find_text(
        elem, 'faultstring'
    )
    code = find_text(elem, 'errorCode')
    try:
        code = int(code)
    except (TypeError, ValueError):
        code = UNKNOWN_CODE
    return code, description


def exception_for_fault(code: int, description: Optional[str] = None):
    if code in NOT_FOUND_CODES:
        return UltraDnsClientNotFound(
            code, description or NOT_FOUND_CODES[code]
        )
    if code in ALREADY_EXISTS_CODES:
        return UltraDnsClientAlreadyExists(
            code, description or ALREADY_EXISTS_CODES[code]
        )
    return UltraDnsClientFault(code, description)
