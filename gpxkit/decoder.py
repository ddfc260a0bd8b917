"""GPX decoder for gpxkit.

Turns the bytes of a GPX 1.1 document into a :class:`~gpxkit.models.Document`.
libxml2 (through lxml) honours the encoding declared in the XML prolog, so
exports written in ISO-8859-1, windows-1252 or Shift_JIS by GPS vendor tools
decode without mangling names and descriptions.

Elements are matched by local name, so documents with or without the GPX
namespace decode the same way, and elements the model does not know about
are skipped.
"""

from __future__ import annotations

import logging
from typing import IO, Callable, TypeVar

from lxml import etree

from gpxkit.errors import DecodeError
from gpxkit.models import (
    DeviceExtension,
    Document,
    Extensions,
    Fix,
    Link,
    Metadata,
    Point,
    Segment,
    Track,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_PARSE_ERRORS = (etree.XMLSyntaxError, LookupError, ValueError)


def _parser(recover: bool = False) -> etree.XMLParser:
    # parser instances must not be shared between threads; only entities
    # declared in the document itself are expanded
    return etree.XMLParser(recover=recover, resolve_entities="internal", no_network=True)


def _local_name(element) -> str | None:
    if not isinstance(element.tag, str):
        return None
    return etree.QName(element).localname


def _children(element, name: str) -> list:
    return [child for child in element if _local_name(child) == name]


def _child(element, name: str):
    for child in element:
        if _local_name(child) == name:
            return child
    return None


def _text(element, name: str) -> str:
    """Character data directly inside the ``name`` child, around any comments."""
    child = _child(element, name)
    if child is None:
        return ""
    return "".join([child.text or ""] + [node.tail or "" for node in child])


def _extensions(element) -> Extensions | None:
    child = _child(element, "extensions")
    if child is None:
        return None
    inner = (child.text or "") + "".join(etree.tostring(node, encoding="unicode") for node in child)
    return Extensions(raw=inner.encode("utf-8"))


def _fix(element) -> Fix | None:
    text = _text(element, "fix").strip()
    if not text:
        return None
    try:
        return Fix(text)
    except ValueError:
        logger.warning("Ignoring unknown fix type %r", text)
        return None


class _TreeMapper:
    """Maps a parsed element tree onto the document model.

    A strict mapper raises :class:`DecodeError` on the first value that does
    not fit the model. A lenient one drops that value (or the point missing
    its coordinates) and keeps going, which is how the best-effort document
    attached to a ``DecodeError`` is built.
    """

    def __init__(self, strict: bool = True):
        self.strict = strict

    def _invalid(self, message: str, exc: Exception | None = None) -> None:
        if self.strict:
            raise DecodeError(message) from exc
        logger.debug("Dropping %s", message)

    def number(self, element, name: str, convert: Callable[[str], T]) -> T | None:
        text = _text(element, name).strip()
        if not text:
            return None
        try:
            return convert(text)
        except ValueError as exc:
            self._invalid(f"invalid <{name}> value {text!r}", exc)
            return None

    def coordinate(self, element, name: str) -> float | None:
        value = element.get(name)
        if value is None:
            self._invalid(f"<trkpt> is missing the {name!r} attribute")
            return None
        try:
            return float(value)
        except ValueError as exc:
            self._invalid(f"invalid {name!r} attribute {value!r}", exc)
            return None

    def links(self, element) -> tuple[Link, ...]:
        return tuple(
            Link(url=link.get("href", ""), text=_text(link, "text"), type=_text(link, "type"))
            for link in _children(element, "link")
        )

    def device_extension(self, element) -> DeviceExtension | None:
        extensions = _child(element, "extensions")
        if extensions is None:
            return None
        tpe = _child(extensions, "TrackPointExtension")
        if tpe is None:
            return None
        return DeviceExtension(
            temperature=self.number(tpe, "atemp", float),
            water_temperature=self.number(tpe, "wtemp", float),
            depth=self.number(tpe, "depth", float),
            heart_rate=self.number(tpe, "hr", int),
            cadence=self.number(tpe, "cad", int),
        )

    def point(self, element) -> Point | None:
        latitude = self.coordinate(element, "lat")
        longitude = self.coordinate(element, "lon")
        if latitude is None or longitude is None:
            return None
        return Point(
            latitude=latitude,
            longitude=longitude,
            elevation=self.number(element, "ele", float),
            timestamp=_text(element, "time"),
            magnetic_variation=self.number(element, "magvar", float),
            geoid_height=self.number(element, "geoidheight", float),
            name=_text(element, "name"),
            comment=_text(element, "cmt"),
            description=_text(element, "desc"),
            source=_text(element, "src"),
            links=self.links(element),
            symbol=_text(element, "sym"),
            type=_text(element, "type"),
            fix=_fix(element),
            satellites=self.number(element, "sat", int),
            hdop=self.number(element, "hdop", float),
            vdop=self.number(element, "vdop", float),
            pdop=self.number(element, "pdop", float),
            age_of_gps_data=self.number(element, "ageofgpsdata", float),
            dgps_id=self.number(element, "dgpsid", int),
            extension=self.device_extension(element),
        )

    def segment(self, element) -> Segment:
        points = (self.point(trkpt) for trkpt in _children(element, "trkpt"))
        return Segment(
            points=tuple(point for point in points if point is not None),
            extensions=_extensions(element),
        )

    def track(self, element) -> Track:
        return Track(
            name=_text(element, "name"),
            comment=_text(element, "cmt"),
            description=_text(element, "desc"),
            source=_text(element, "src"),
            links=self.links(element),
            number=self.number(element, "number", int),
            type=_text(element, "type"),
            extensions=_extensions(element),
            segments=tuple(self.segment(trkseg) for trkseg in _children(element, "trkseg")),
        )

    def document(self, root) -> Document:
        if _local_name(root) != "gpx":
            self._invalid(f"expected a <gpx> root element, got <{_local_name(root)}>")
            return Document()
        metadata = _child(root, "metadata")
        return Document(
            creator=root.get("creator", ""),
            version=root.get("version", ""),
            metadata=Metadata(timestamp=_text(metadata, "time")) if metadata is not None else None,
            tracks=tuple(self.track(trk) for trk in _children(root, "trk")),
        )


def _recover(data: bytes) -> Document:
    """Best-effort document from input the strict parser rejected."""
    try:
        root = etree.fromstring(data, parser=_parser(recover=True))
    except _PARSE_ERRORS:
        return Document()
    if root is None:
        return Document()
    return _TreeMapper(strict=False).document(root)


def decode(stream: bytes | bytearray | IO[bytes]) -> Document:
    """Decode a GPX document.

    Args:
        stream: The raw document, as bytes or a binary file-like object.

    Returns:
        The decoded document.

    Raises:
        DecodeError: If the input is not well-formed XML, uses an unsupported
            encoding, or has values that do not fit the GPX model. The
            ``document`` attribute carries whatever could be recovered.
        TypeError: If ``stream`` yields text instead of bytes.
    """
    data = stream.read() if hasattr(stream, "read") else stream
    if isinstance(data, str):
        raise TypeError("decode() needs bytes so the declared encoding can be honoured")
    data = bytes(data)

    try:
        root = etree.fromstring(data, parser=_parser())
    except _PARSE_ERRORS as exc:
        raise DecodeError(f"malformed GPX document: {exc}", document=_recover(data)) from exc

    try:
        document = _TreeMapper().document(root)
    except DecodeError as exc:
        exc.document = _TreeMapper(strict=False).document(root)
        raise

    logger.debug(
        "Decoded GPX from %s (%s encoding): %d track(s)",
        document.creator or "unknown creator",
        root.getroottree().docinfo.encoding,
        len(document.tracks),
    )
    return document
