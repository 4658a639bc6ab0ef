"""Strict loading of FCU XML configuration files.

Binding follows the field table in ``fcu2json.schema``; the first
mismatch rejects the whole file with a ``ParseFailedError``.
"""

from typing import Any

import structlog
from lxml import etree

from .exceptions import OpenFailedError, ParseFailedError
from .models import MergModuleDataSet
from .schema import CONVERTERS, RECORDS, ROOT_TAG, RecordSpec

logger = structlog.get_logger(__name__)


def _make_parser() -> etree.XMLParser:
    # Strict: no recovery, no entity expansion, no network fetches
    return etree.XMLParser(
        recover=False,
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
    )


def _local_name(element: etree._Element) -> str:
    """Tag without namespace (FCU exports may carry a default xmlns)."""
    return etree.QName(element).localname


def load(path: str) -> MergModuleDataSet:
    """Reads an FCU XML configuration file into a MergModuleDataSet.

    The whole document must match the schema: any malformed XML, missing
    element or unconvertible value rejects the file. No partial dataset is
    ever returned.

    Args:
        path: Path to the FCU XML file.

    Returns:
        The dataset with modules, user events and user nodes in document order.

    Raises:
        OpenFailedError: If the file cannot be opened.
        ParseFailedError: If the file is not a valid FCU document.
    """
    path = str(path)
    try:
        f = open(path, "rb")
    except OSError as e:
        logger.error("config_open_failed", path=path, reason=e.strerror)
        raise OpenFailedError(path, reason=e.strerror) from e

    with f:
        try:
            tree = etree.parse(f, _make_parser())
        except etree.XMLSyntaxError as e:
            logger.error("config_xml_invalid", path=path, error=str(e))
            raise ParseFailedError(
                f"error during deserialization of {path}: {e}",
                path,
                error_data={"line": e.lineno},
            ) from e

    dataset = _bind_dataset(tree.getroot(), path)
    logger.info(
        "config_loaded",
        path=path,
        merg_modules=len(dataset.merg_modules),
        user_events=len(dataset.user_events),
        user_nodes=len(dataset.user_nodes),
    )
    return dataset


def _bind_dataset(root: etree._Element, path: str) -> MergModuleDataSet:
    root_name = _local_name(root)
    if root_name != ROOT_TAG:
        logger.error("config_root_invalid", path=path, root=root_name)
        raise ParseFailedError(
            f"unexpected root element <{root_name}> in {path}",
            path,
            field=ROOT_TAG,
            expected=f"<{ROOT_TAG}> root element",
            received=root_name,
        )

    dataset = MergModuleDataSet()
    for child in root:
        if not isinstance(child.tag, str):
            continue
        tag = _local_name(child)
        spec = RECORDS.get(tag)
        if spec is None:
            logger.debug("config_element_ignored", path=path, tag=tag)
            continue
        records = getattr(dataset, spec.dataset_attr)
        records.append(_bind_record(child, spec, len(records), path))
    return dataset


def _find_leaf(element: etree._Element, name: str) -> str | None:
    """Returns the text of a leaf element, falling back to an attribute.

    Raises:
        ValueError: If the leaf is repeated or holds child nodes (nested
            elements or unexpanded entity references).
    """
    matches = [
        c for c in element if isinstance(c.tag, str) and _local_name(c) == name
    ]
    if len(matches) > 1:
        raise ValueError(f"duplicate element <{name}>")
    if not matches:
        return element.get(name)
    leaf = matches[0]
    if len(leaf) > 0:
        raise ValueError(f"unexpected child content in <{name}>")
    return leaf.text or ""


def _bind_record(
    element: etree._Element, spec: RecordSpec, index: int, path: str
) -> Any:
    values: dict[str, Any] = {}
    for field in spec.fields:
        try:
            text = _find_leaf(element, field.xml_name)
        except ValueError as e:
            _log_field_failure(path, spec.tag, index, field.xml_name, None, str(e))
            raise ParseFailedError(
                f"{spec.tag}[{index}]: {e}",
                path,
                record=spec.tag,
                index=index,
                field=field.xml_name,
                expected=f"a single text-only <{field.xml_name}>",
            ) from e

        if text is None:
            _log_field_failure(path, spec.tag, index, field.xml_name, None, "missing")
            raise ParseFailedError(
                f"{spec.tag}[{index}]: missing field '{field.xml_name}'",
                path,
                record=spec.tag,
                index=index,
                field=field.xml_name,
                expected=field.kind,
            )

        try:
            values[field.attr] = CONVERTERS[field.kind](text)
        except ValueError as e:
            _log_field_failure(path, spec.tag, index, field.xml_name, text, str(e))
            raise ParseFailedError(
                f"{spec.tag}[{index}]: invalid value for '{field.xml_name}'",
                path,
                record=spec.tag,
                index=index,
                field=field.xml_name,
                expected=field.kind,
                received=text,
            ) from e

    return spec.model(**values)


def _log_field_failure(
    path: str,
    record: str,
    index: int,
    field: str,
    received: str | None,
    reason: str,
) -> None:
    logger.warning(
        "config_field_invalid",
        path=path,
        record=record,
        index=index,
        field=field,
        received=received,
        reason=reason,
    )
