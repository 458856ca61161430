"""HomeBank XHB file reader producing raw attribute records."""

from pathlib import Path
import xml.etree.ElementTree as ET

from hbledger.application.ports.ledger_source import LedgerSourcePort
from hbledger.domain.errors import (
    MalformedSourceError,
    SourceNotFoundError,
    SourceUnreadableError,
)
from hbledger.domain.ledger import LedgerRecords
from hbledger.infrastructure.logging.logger import get_app_logger

ROOT_ELEMENT = "homebank"


class XhbLedgerSource(LedgerSourcePort):
    """Read a ``.xhb`` file into attribute records grouped by element."""

    def __init__(self, path: Path | str, logger=None) -> None:
        """Initialize the source.

        Args:
            path: Filesystem path to the HomeBank file.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._path = Path(path)
        self._logger = logger or get_app_logger()

    @property
    def path(self) -> Path:
        return self._path

    def read_records(self) -> LedgerRecords:
        """Parse the file and return its records.

        Raises:
            SourceNotFoundError: If the path does not exist.
            SourceUnreadableError: If the path cannot be opened or read.
            MalformedSourceError: If the content is not a HomeBank document.
        """
        if not self._path.exists():
            raise SourceNotFoundError(self._path)
        try:
            with self._path.open("rb") as handle:
                tree = ET.parse(handle)
        except ET.ParseError as exc:
            raise MalformedSourceError(self._path, str(exc)) from exc
        except OSError as exc:
            raise SourceUnreadableError(self._path, str(exc)) from exc
        records = self._collect(tree.getroot(), self._path)
        count = sum(len(items) for items in records.elements.values())
        self._logger.info(f"Read {count} records from {self._path}")
        return records

    @classmethod
    def records_from_string(cls, text: str | bytes) -> LedgerRecords:
        """Parse XHB content held in memory.

        Raises:
            MalformedSourceError: If the content is not a HomeBank document.
        """
        try:
            root = ET.fromstring(text)
        except ET.ParseError as exc:
            raise MalformedSourceError(None, str(exc)) from exc
        return cls._collect(root)

    @staticmethod
    def _collect(root: ET.Element, path: Path | None = None) -> LedgerRecords:
        if root.tag != ROOT_ELEMENT:
            raise MalformedSourceError(
                path,
                f"Expected <{ROOT_ELEMENT}> root element, got <{root.tag}>.",
            )
        elements: dict[str, list[list[tuple[str, str]]]] = {}
        for element in root:
            elements.setdefault(element.tag, []).append(
                list(element.attrib.items())
            )
        return LedgerRecords(
            root=list(root.attrib.items()),
            elements=elements,
        )


__all__ = ["XhbLedgerSource", "ROOT_ELEMENT"]
