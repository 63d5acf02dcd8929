from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Dict

from bright_web.adapters.storage import ApplicationStorage
from bright_web.domain.errors import (
    FILE_DOES_NOT_EXIST,
    INVALID_XML_FILE,
    JSON_LAST_ERROR_ENCODE,
    StorageDecodeError,
    StorageEncodeError,
    StorageFileNotFound,
)


def element_to_dict(element: ET.Element) -> Dict[str, Any]:
    """
    Children of ``element`` keyed by tag. Elements with children recurse,
    leaves become their text; a repeated leaf tag collects into a list.
    """
    out: Dict[str, Any] = {}
    for child in element:
        if len(child):
            out[child.tag] = element_to_dict(child)
            continue

        text = (child.text or "").strip()
        if child.tag not in out:
            out[child.tag] = text
        elif isinstance(out[child.tag], list):
            out[child.tag].append(text)
        else:
            out[child.tag] = [out[child.tag], text]
    return out


class XmlStorage(ApplicationStorage):
    label = "Xml"

    def decode_file(self, path: Path) -> Dict[str, Any]:
        try:
            root = ET.parse(path).getroot()
        except ET.ParseError as e:
            raise self._make_exception(f"Xml Exception (invalid XML file {path}: {e})", INVALID_XML_FILE, StorageDecodeError) from e
        except OSError as e:
            raise self._make_exception(f"Xml Exception (file is not readable: {path})", INVALID_XML_FILE, StorageDecodeError) from e
        return element_to_dict(root)

    def get_encoded_data_as_string(self, value: Any) -> str:
        # Use the JSON storage if encoding is needed
        raise self._make_exception(
            "Xml Exception: get_encoded_data_as_string not yet built.",
            JSON_LAST_ERROR_ENCODE,
            StorageEncodeError,
        )

    def set_file_data(self, path, key: str) -> None:
        path = Path(path)
        if not path.is_file():
            raise self._make_exception(f"Xml Exception (file does not exist: {path})", FILE_DOES_NOT_EXIST, StorageFileNotFound)
        self._data[key] = self.decode_file(path)
