"""Value types for tracking parameters with a dedicated wire format.

Each type renders its wire representation through ``str()``, which is what
the query serializer appends (after percent-encoding).
"""

import re
import secrets
import uuid
from dataclasses import dataclass, field

_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]+")

_UNIQUE_ID_CHARS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

_UINT64_MASK = 0xFFFFFFFFFFFFFFFF


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _string_hash(value: str) -> int:
    """Java's ``String.hashCode``: signed 32-bit, over UTF-16 code units."""
    data = value.encode("utf-16-be")
    h = 0
    for i in range(0, len(data), 2):
        h = (31 * h + int.from_bytes(data[i : i + 2], "big")) & 0xFFFFFFFF
    if h >= 1 << 31:
        h -= 1 << 32
    return h


@dataclass(frozen=True)
class VisitorId:
    """A 64-bit visitor identifier rendered as 16 lowercase hex characters.

    Prefer a stable id per visitor (``from_hash`` / ``from_string``) over
    ``random()`` so that repeated visits are attributed to the same visitor.
    """

    representation: bytes

    def __post_init__(self) -> None:
        if len(self.representation) != 8:
            raise ValueError("Visitor ID must consist of exactly 8 bytes")

    @classmethod
    def random(cls) -> "VisitorId":
        """Create a visitor id from 8 cryptographically random bytes."""
        return cls(secrets.token_bytes(8))

    @classmethod
    def from_hash(cls, hash_value: int) -> "VisitorId":
        """Create the same visitor id for the same 64-bit number.

        Negative numbers are taken as two's complement, so any signed
        64-bit hash code is accepted.
        """
        return cls((hash_value & _UINT64_MASK).to_bytes(8, "big"))

    @classmethod
    def from_uuid(cls, value: uuid.UUID) -> "VisitorId":
        """Create a visitor id from the most significant 64 bits of a UUID."""
        return cls.from_hash(value.int >> 64)

    @classmethod
    def from_hex(cls, input_hex: str) -> "VisitorId":
        """Create a visitor id from up to 16 hex digits, left-padded with zeros."""
        if _is_blank(input_hex):
            raise ValueError("Hex string must not be null or empty")
        if len(input_hex) > 16:
            raise ValueError("Hex string must not be longer than 16 characters")
        if not _HEX_DIGITS.fullmatch(input_hex):
            raise ValueError("Input must be a valid hex string")
        return cls(bytes.fromhex(input_hex.rjust(16, "0")))

    @classmethod
    def from_string(cls, value: str | None) -> "VisitorId | None":
        """Create a visitor id from the Java ``String.hashCode`` of the given string.

        Returns None for None or blank input.
        """
        if _is_blank(value):
            return None
        return cls.from_hash(_string_hash(value))

    def __str__(self) -> str:
        return self.representation.hex()


@dataclass(frozen=True)
class RandomValue:
    """Cache buster sent as ``rand``.

    Either 10 random bytes rendered as hex, or a literal override.
    """

    representation: bytes = b""
    override: str | None = None

    @classmethod
    def random(cls) -> "RandomValue":
        return cls(representation=secrets.token_bytes(10))

    @classmethod
    def from_string(cls, override: str) -> "RandomValue":
        """Use the given string as is."""
        return cls(override=override)

    def __str__(self) -> str:
        if self.override is not None:
            return self.override
        return self.representation.hex()


@dataclass(frozen=True)
class UniqueId:
    """Six character alphanumeric id, used for page view ids (``pv_id``)."""

    value: int

    @classmethod
    def random(cls) -> "UniqueId":
        return cls.from_value(secrets.randbits(64) - (1 << 63))

    @classmethod
    def from_value(cls, value: int) -> "UniqueId":
        return cls(value)

    def __str__(self) -> str:
        chars = []
        for i in range(6):
            # Low 32 bits of the shifted value, read as a signed int
            code_point = (self.value >> (i * 8)) & 0xFFFFFFFF
            if code_point >= 1 << 31:
                code_point -= 1 << 32
            chars.append(_UNIQUE_ID_CHARS[abs(code_point) % len(_UNIQUE_ID_CHARS)])
        return "".join(chars)


@dataclass(frozen=True)
class DeviceResolution:
    """Screen resolution rendered as ``WIDTHxHEIGHT``."""

    width: int
    height: int

    @classmethod
    def from_string(cls, value: str | None) -> "DeviceResolution | None":
        """Parse a resolution like ``1024x768``.

        Returns None for None or blank input.
        """
        if _is_blank(value):
            return None
        dimensions = value.split("x")
        if len(dimensions) != 2:
            raise ValueError("Wrong dimension size")
        return cls(width=int(dimensions[0]), height=int(dimensions[1]))

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class LanguageRange:
    """A single ``Accept-Language`` entry."""

    range: str
    weight: float = 1.0

    def __str__(self) -> str:
        if self.weight == 1.0:
            return self.range.lower()
        return f"{self.range.lower()};q={self.weight}"


@dataclass(frozen=True)
class AcceptLanguage:
    """Ordered language ranges, sent as ``lang``.

    Attributes:
        language_ranges: Ranges in preference order as given by the caller.
    """

    language_ranges: tuple[LanguageRange, ...] = field(default_factory=tuple)

    @classmethod
    def from_header(cls, header: str | None) -> "AcceptLanguage | None":
        """Parse an ``Accept-Language`` header value.

        Ranges are lower-cased and sorted by descending weight; ranges with
        weight 0 are dropped. Returns None for None or blank input.
        """
        if _is_blank(header):
            return None
        return cls(tuple(parse_language_ranges(header)))

    def __str__(self) -> str:
        return ",".join(str(language_range) for language_range in self.language_ranges)


def parse_language_ranges(header: str) -> list[LanguageRange]:
    """Parse a comma separated list of language ranges with optional q-values.

    Args:
        header: Header value, e.g. ``"en-GB;q=0.7,de,de-DE;q=0.9"``.

    Returns:
        Language ranges ordered by descending weight. Ranges with equal weight
        keep their original order.

    Raises:
        ValueError: If a range or weight is malformed.
    """
    ranges: list[LanguageRange] = []
    for part in header.split(","):
        part = part.strip()
        if not part:
            continue
        name, _, parameter = part.partition(";")
        name = name.strip().lower()
        if not re.fullmatch(r"\*|[a-z]{1,8}(-[a-z0-9]{1,8})*", name):
            raise ValueError(f"Invalid language range: {part}")
        weight = 1.0
        if parameter:
            key, _, raw_weight = parameter.strip().partition("=")
            if key.strip() != "q":
                raise ValueError(f"Invalid language range: {part}")
            weight = float(raw_weight)
            if not 0.0 <= weight <= 1.0:
                raise ValueError(f"Invalid weight: {raw_weight}")
        if weight > 0.0:
            ranges.append(LanguageRange(name, weight))
    return sorted(ranges, key=lambda language_range: -language_range.weight)


@dataclass(frozen=True)
class Country:
    """Two letter country code, lower-cased, sent as ``country``."""

    code: str

    @classmethod
    def from_code(cls, code: str | None) -> "Country | None":
        """Create a country from a two letter code. Returns None for blank input."""
        if _is_blank(code):
            return None
        if len(code) == 2:
            return cls(code.lower())
        raise ValueError("Invalid country code")

    @classmethod
    def from_language_ranges(cls, ranges: str | None) -> "Country | None":
        """Take the country of the highest weighted range with a region subtag.

        ``"en-GB;q=0.7,de,de-DE;q=0.9"`` yields ``de``.
        """
        if _is_blank(ranges):
            return None
        for language_range in parse_language_ranges(ranges):
            parts = language_range.range.split("-")
            if len(parts) == 2 and len(parts[1]) == 2:
                return cls(parts[1].lower())
        raise ValueError("Invalid country code")

    def __str__(self) -> str:
        return self.code
