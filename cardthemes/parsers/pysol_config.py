"""
Parser for the PySol cardset config.txt format.

Line-oriented, at least six lines, each with its own grammar:

    0  PySol solitaire cardset;<version>[;<ext>;<type>;<ncards>...]
    1  <id>;<name>
    2  <width> <height> <delta>
    3  (ignored)
    4  <default back filename>
    5  <back>;<back>;...

Example:
    PySol solitaire cardset;4;.gif;1;52;0
    PYSOL_GENERIC;Standard
    73 97 8
    18 18 7 7
    back01.gif
    back01.gif;back02.gif;back03.gif

Header fields after the version only exist from version 3 on. Anything
other than a 52-card French deck is refused.
"""

import logging
import re
from pathlib import Path
from typing import NamedTuple

from cardthemes.config import (
    CONFIG_FILENAME,
    DEFAULT_IMAGE_EXTENSION,
    FRENCH_CARD_COUNT,
    HEADER_EXTENSION_VERSION,
    MIN_CONFIG_LINES,
    PYSOL_MAGIC,
)
from cardthemes.models.cardset import (
    CardsetDescriptor,
    CardsetType,
    create_cardset_descriptor,
    describe_deck_type,
)
from cardthemes.models.failure import CardsetParseError, FailureKind

logger = logging.getLogger(__name__)

# Optional sign and a run of ASCII digits; anything after the run is ignored
INT_PREFIX_PATTERN = re.compile(r"[+-]?[0-9]+")

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ConfigHeader(NamedTuple):
    version: int
    image_extension: str | None
    deck_type: int
    card_count: int


def parse_int(field: str) -> int | None:
    """
    Parse a base-10 integer from an already stripped field.

    Like C strtol, the leading digits are consumed and any suffix is
    ignored ("12px" is 12). A field with no digits, or a value that does
    not fit in 64 bits, is a failure.

    Returns:
        The integer, or None if nothing could be parsed
    """
    match = INT_PREFIX_PATTERN.match(field)
    if not match:
        return None

    value = int(match.group())
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


def parse_header_line(line: str) -> ConfigHeader:
    """
    Parse line 0: magic, version and (version >= 3) extension, type, count.

    Raises:
        CardsetParseError: BAD_MAGIC, BAD_VERSION or BAD_HEADER_FIELD
    """
    fields = line.split(";")

    if fields[0].strip() != PYSOL_MAGIC:
        raise CardsetParseError(
            FailureKind.BAD_MAGIC,
            "Not a PySol cardset header",
            detail=fields[0].strip()[:80],
        )
    if len(fields) < 2:
        raise CardsetParseError(FailureKind.BAD_VERSION, "Header has no version field")

    version = parse_int(fields[1].strip())
    if version is None:
        raise CardsetParseError(
            FailureKind.BAD_VERSION,
            "Header version is not an integer",
            detail=fields[1].strip(),
        )

    if version < HEADER_EXTENSION_VERSION:
        # Old headers: French deck implied, no extension declared
        return ConfigHeader(
            version=version,
            image_extension=None,
            deck_type=CardsetType.FRENCH,
            card_count=FRENCH_CARD_COUNT,
        )

    if len(fields) < 5:
        raise CardsetParseError(
            FailureKind.BAD_HEADER_FIELD,
            f"Version {version} header needs at least 5 fields",
            detail=f"got {len(fields)}",
        )

    extension = fields[2].strip() or DEFAULT_IMAGE_EXTENSION
    deck_type = parse_int(fields[3].strip())
    card_count = parse_int(fields[4].strip())
    if deck_type is None or card_count is None:
        raise CardsetParseError(
            FailureKind.BAD_HEADER_FIELD,
            "Header deck type or card count is not an integer",
            detail=f"{fields[3].strip()!r}, {fields[4].strip()!r}",
        )

    return ConfigHeader(
        version=version,
        image_extension=extension,
        deck_type=deck_type,
        card_count=card_count,
    )


def check_header_supported(header: ConfigHeader) -> None:
    """
    Refuse headers describing anything but a 52-card French deck.

    Raises:
        CardsetParseError: UNSUPPORTED_DECK_TYPE or MISSING_EXTENSION
    """
    if header.deck_type != CardsetType.FRENCH or header.card_count != FRENCH_CARD_COUNT:
        raise CardsetParseError(
            FailureKind.UNSUPPORTED_DECK_TYPE,
            "Only the 52-card French deck is supported",
            detail=f"{describe_deck_type(header.deck_type)}, {header.card_count} cards",
        )
    if not header.image_extension:
        raise CardsetParseError(
            FailureKind.MISSING_EXTENSION,
            f"Version {header.version} header declares no image extension",
        )


def parse_name_line(line: str) -> str:
    """
    Parse line 1: ``<id>;<name>``.

    Raises:
        CardsetParseError: MISSING_NAME
    """
    fields = line.split(";")
    name = fields[1].strip() if len(fields) >= 2 else ""
    if not name:
        raise CardsetParseError(FailureKind.MISSING_NAME, "Cardset has no name", detail=line)
    return name


def parse_geometry_line(line: str) -> tuple[int, int, int]:
    """
    Parse line 2: exactly three space-separated integers.

    Returns:
        (width, height, delta)

    Raises:
        CardsetParseError: BAD_GEOMETRY
    """
    fields = line.split(" ")
    if len(fields) != 3:
        raise CardsetParseError(
            FailureKind.BAD_GEOMETRY,
            "Card geometry needs width, height and delta",
            detail=line,
        )

    values = [parse_int(field.strip()) for field in fields]
    if any(value is None for value in values):
        raise CardsetParseError(
            FailureKind.BAD_GEOMETRY,
            "Card geometry is not numeric",
            detail=line,
        )

    width, height, delta = values
    return width, height, delta  # type: ignore[return-value]


def parse_backs_line(line: str) -> list[str]:
    """
    Parse line 5: semicolon-separated back filenames.

    Raises:
        CardsetParseError: NO_BACKS
    """
    backs = [back.strip() for back in line.split(";")]
    backs = [back for back in backs if back]
    if not backs:
        raise CardsetParseError(FailureKind.NO_BACKS, "Cardset declares no back images")
    return backs


def split_config_lines(text: str) -> list[str]:
    """
    Split config text into stripped lines.

    A final newline does not start an extra line.

    Raises:
        CardsetParseError: MISSING_FILE or TOO_FEW_LINES
    """
    if not text:
        raise CardsetParseError(FailureKind.MISSING_FILE, "Config file is empty")

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()

    if len(lines) < MIN_CONFIG_LINES:
        raise CardsetParseError(
            FailureKind.TOO_FEW_LINES,
            f"Config needs at least {MIN_CONFIG_LINES} lines",
            detail=f"got {len(lines)}",
        )

    return [line.strip() for line in lines]


def parse_config_text(text: str, base_path: Path) -> CardsetDescriptor:
    """
    Parse config.txt content into a descriptor.

    Args:
        text: Full content of config.txt
        base_path: Cardset directory the images live in

    Returns:
        Validated CardsetDescriptor

    Raises:
        CardsetParseError: On the first line that fails its grammar
    """
    lines = split_config_lines(text)

    header = parse_header_line(lines[0])
    check_header_supported(header)

    name = parse_name_line(lines[1])
    geometry = parse_geometry_line(lines[2])
    backs = parse_backs_line(lines[5])

    return create_cardset_descriptor(
        name=name,
        base_path=base_path,
        image_extension=header.image_extension,
        format_version=header.version,
        deck_type=header.deck_type,
        card_count=header.card_count,
        geometry=geometry,
        backs=backs,
        default_back=lines[4],
    )


def parse_cardset(root: Path | str, subdirectory: str) -> CardsetDescriptor:
    """
    Read and parse ``root/subdirectory/config.txt``.

    Args:
        root: Search root containing the cardset directory
        subdirectory: Cardset directory name

    Returns:
        Validated CardsetDescriptor with base_path ``root/subdirectory``

    Raises:
        CardsetParseError: If the file is unreadable or malformed, with
            config_path set
    """
    base_path = Path(root) / subdirectory
    config_path = base_path / CONFIG_FILENAME

    try:
        # PySol configs predate UTF-8; undecodable bytes only affect names
        text = config_path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise CardsetParseError(
            FailureKind.MISSING_FILE,
            "Config file is not readable",
            detail=f"{type(e).__name__}: {e.strerror or e}",
            config_path=config_path,
        ) from e

    try:
        descriptor = parse_config_text(text, base_path)
    except CardsetParseError as e:
        e.config_path = config_path
        raise

    logger.debug("Parsed cardset %r from %s", descriptor.name, config_path)
    return descriptor


def try_parse_cardset(root: Path | str, subdirectory: str) -> CardsetDescriptor | CardsetParseError:
    """
    Parse a cardset, returning the failure as a value instead of raising.

    Returns:
        The descriptor, or the CardsetParseError describing the refusal
    """
    try:
        return parse_cardset(root, subdirectory)
    except CardsetParseError as e:
        return e
