"""Baseline formats shared by every specification version.

COMMON_BUILTIN_FORMATS seeds the format keyword of each standard dialect.
Pattern formats carry their expressions verbatim; the remaining formats
use predicates built on the standard library parsers.
"""

from __future__ import annotations

import ipaddress
import re
from datetime import date
from urllib.parse import urlsplit

from metaschema.formats.base import Format, PredicateFormat, pattern

_HEX = "[0-9A-Fa-f]"

_HOSTNAME_RE = (
    r"^([a-zA-Z0-9]|[a-zA-Z0-9][a-zA-Z0-9\-]{0,61}[a-zA-Z0-9])"
    r"(\.([a-zA-Z0-9]|[a-zA-Z0-9][a-zA-Z0-9\-]{0,61}[a-zA-Z0-9]))*$"
)
_IPV4_OCTET = r"([0-9]|[1-9][0-9]|1[0-9][0-9]|2[0-4][0-9]|25[0-5])"
_IPV4_RE = rf"^({_IPV4_OCTET}\.){{3}}{_IPV4_OCTET}$"
_JSON_POINTER_RE = r"^(/([^/#~]|[~](?=[01]))*)*$"
_RELATIVE_JSON_POINTER_RE = r"^(0|([1-9]\d*))(#|(/([^/#~]|[~](?=[01]))*)*)$"
_URI_TEMPLATE_VAR = rf"((\w|%{_HEX}{{2}})(\.?(\w|%{_HEX}{{2}}))*(:[1-9]\d{{0,3}}|\*)?)"
_URI_TEMPLATE_RE = (
    r"^([^\x00-\x1f\x7f\"'%<>\^`{|}]"
    rf"|%{_HEX}{{2}}"
    rf"|\{{[+#./;?&=,!@|]?{_URI_TEMPLATE_VAR}(,{_URI_TEMPLATE_VAR})*\}})*$"
)
_UUID_RE = rf"^{_HEX}{{8}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{12}}$"

_RGB_OCTET = r"\b([0-9]|[1-9][0-9]|1[0-9][0-9]|2[0-4][0-9]|25[0-5])\b"
_COLOR_RE = (
    r"(#?([0-9A-Fa-f]{3,6})\b)|(aqua)|(black)|(blue)|(fuchsia)|(gray)|(green)|(lime)"
    r"|(maroon)|(navy)|(olive)|(orange)|(purple)|(red)|(silver)|(teal)|(white)|(yellow)"
    rf"|(rgb\(\s*{_RGB_OCTET}\s*,\s*{_RGB_OCTET}\s*,\s*{_RGB_OCTET}\s*\))"
    r"|(rgb\(\s*(\d?\d%|100%)+\s*,\s*(\d?\d%|100%)+\s*,\s*(\d?\d%|100%)+\s*\))"
)

_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_TIME_RE = re.compile(
    r"^(\d{2}):(\d{2}):(\d{2})(\.\d+)?([Zz]|([+-])(\d{2}):(\d{2}))$"
)
_DURATION_RE = re.compile(
    r"^P(?!$)(\d+W|(\d+Y)?(\d+M)?(\d+D)?(T(?=\d)(\d+H)?(\d+M)?(\d+S)?)?)$"
)
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_ASCII_HOSTNAME = re.compile(_HOSTNAME_RE)
_DOT_ATOM_RE = re.compile(r"^[A-Za-z0-9!#$%&'*+/=?^_`{|}~\-]+(\.[A-Za-z0-9!#$%&'*+/=?^_`{|}~\-]+)*$")
_IDN_DOT_ATOM_RE = re.compile(r"^[^\s\"(),.:;<>@\[\\\]]+(\.[^\s\"(),.:;<>@\[\\\]]+)*$")
_QUOTED_LOCAL_RE = re.compile(r'^"([^"\\\r\n]|\\.)*"$')
_FORBIDDEN_IRI_CHARS = frozenset(' <>"{}|\\^`')


def is_ipv6(value: str) -> bool:
    if "%" in value:
        return False
    try:
        ipaddress.IPv6Address(value)
    except ValueError:
        return False
    return True


def is_date(value: str) -> bool:
    if not _DATE_RE.fullmatch(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def _parse_time(value: str) -> tuple[int, int, int, int] | None:
    """Return (hour, minute, second, offset_minutes) for an RFC 3339 full-time."""
    m = _TIME_RE.fullmatch(value)
    if m is None:
        return None
    hour, minute, second = int(m.group(1)), int(m.group(2)), int(m.group(3))
    offset = 0
    if m.group(6):
        off_hour, off_minute = int(m.group(7)), int(m.group(8))
        if off_hour > 23 or off_minute > 59:
            return None
        offset = off_hour * 60 + off_minute
        if m.group(6) == "-":
            offset = -offset
    if hour > 23 or minute > 59 or second > 60:
        return None
    return hour, minute, second, offset


def _is_valid_leap_second(hour: int, minute: int, offset: int) -> bool:
    # A leap second is only inserted at 23:59:60 UTC.
    utc_minutes = (hour * 60 + minute - offset) % (24 * 60)
    return utc_minutes == 23 * 60 + 59


def is_time(value: str) -> bool:
    parsed = _parse_time(value)
    if parsed is None:
        return False
    hour, minute, second, offset = parsed
    if second == 60:
        return _is_valid_leap_second(hour, minute, offset)
    return True


def is_date_time(value: str) -> bool:
    head, sep, tail = value.partition("T")
    if not sep:
        head, sep, tail = value.partition("t")
    if not sep or not is_date(head):
        return False
    parsed = _parse_time(tail)
    if parsed is None:
        return False
    hour, minute, second, offset = parsed
    if second == 60:
        return _is_valid_leap_second(hour, minute, offset)
    return True


def is_duration(value: str) -> bool:
    return _DURATION_RE.fullmatch(value) is not None


def is_idn_hostname(value: str) -> bool:
    if not value or len(value) > 253:
        return False
    try:
        ascii_form = value.encode("idna").decode("ascii")
    except UnicodeError:
        return False
    return _ASCII_HOSTNAME.fullmatch(ascii_form) is not None


def _split_email(value: str) -> tuple[str, str] | None:
    local, sep, domain = value.rpartition("@")
    if not sep or not local or not domain or len(local) > 64:
        return None
    return local, domain


def _is_domain_literal(domain: str) -> bool:
    if not (domain.startswith("[") and domain.endswith("]")):
        return False
    literal = domain[1:-1]
    if literal.lower().startswith("ipv6:"):
        return is_ipv6(literal[5:])
    try:
        ipaddress.IPv4Address(literal)
    except ValueError:
        return False
    return True


def is_email(value: str) -> bool:
    parts = _split_email(value)
    if parts is None:
        return False
    local, domain = parts
    if not (_DOT_ATOM_RE.fullmatch(local) or _QUOTED_LOCAL_RE.fullmatch(local)):
        return False
    return _is_domain_literal(domain) or _ASCII_HOSTNAME.fullmatch(domain) is not None


def is_idn_email(value: str) -> bool:
    parts = _split_email(value)
    if parts is None:
        return False
    local, domain = parts
    if not (_IDN_DOT_ATOM_RE.fullmatch(local) or _QUOTED_LOCAL_RE.fullmatch(local)):
        return False
    return _is_domain_literal(domain) or is_idn_hostname(domain)


def _is_iri_reference(value: str, allow_unicode: bool) -> bool:
    if not allow_unicode and not value.isascii():
        return False
    if any(ch in _FORBIDDEN_IRI_CHARS or ord(ch) < 0x20 for ch in value):
        return False
    try:
        parts = urlsplit(value)
        # Accessing port validates the authority's port component.
        parts.port  # noqa: B018
    except ValueError:
        return False
    return not re.search(r"%(?![0-9A-Fa-f]{2})", value)


def _is_absolute(value: str, allow_unicode: bool) -> bool:
    scheme, sep, _ = value.partition(":")
    if not sep or not _SCHEME_RE.fullmatch(scheme):
        return False
    return _is_iri_reference(value, allow_unicode)


def is_uri(value: str) -> bool:
    return _is_absolute(value, allow_unicode=False)


def is_uri_reference(value: str) -> bool:
    return _is_iri_reference(value, allow_unicode=False)


def is_iri(value: str) -> bool:
    return _is_absolute(value, allow_unicode=True)


def is_iri_reference(value: str) -> bool:
    return _is_iri_reference(value, allow_unicode=True)


def is_regex(value: str) -> bool:
    try:
        re.compile(value)
    except re.error:
        return False
    return True


COMMON_BUILTIN_FORMATS: tuple[Format, ...] = (
    pattern("hostname", _HOSTNAME_RE, "format.hostname"),
    pattern("ipv4", _IPV4_RE, "format.ipv4"),
    PredicateFormat("ipv6", is_ipv6, "format.ipv6"),
    pattern("json-pointer", _JSON_POINTER_RE, "format.json-pointer"),
    pattern("relative-json-pointer", _RELATIVE_JSON_POINTER_RE, "format.relative-json-pointer"),
    pattern("uri-template", _URI_TEMPLATE_RE, "format.uri-template"),
    pattern("uuid", _UUID_RE, "format.uuid"),
    PredicateFormat("date", is_date, "format.date"),
    PredicateFormat("date-time", is_date_time, "format.date-time"),
    PredicateFormat("email", is_email, "format.email"),
    PredicateFormat("idn-email", is_idn_email, "format.idn-email"),
    PredicateFormat("idn-hostname", is_idn_hostname, "format.idn-hostname"),
    PredicateFormat("iri", is_iri, "format.iri"),
    PredicateFormat("iri-reference", is_iri_reference, "format.iri-reference"),
    PredicateFormat("regex", is_regex, "format.regex"),
    PredicateFormat("time", is_time, "format.time"),
    PredicateFormat("uri", is_uri, "format.uri"),
    PredicateFormat("uri-reference", is_uri_reference, "format.uri-reference"),
    PredicateFormat("duration", is_duration, "format.duration"),
    # Not part of any specification draft
    pattern("alpha", r"^[a-zA-Z]+$"),
    pattern("alphanumeric", r"^[a-zA-Z0-9]+$"),
    pattern("color", _COLOR_RE),
    pattern(
        "ip-address",
        r"^(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)$",
    ),
    pattern("phone", r"^\+(?:[0-9] ?){6,14}[0-9]$"),
    pattern("style", r"\s*(.+?):\s*([^;]+);?"),
    pattern("utc-millisec", r"^[0-9]+(\.?[0-9]+)?$"),
)
