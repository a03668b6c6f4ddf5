# core/properties.py
from typing import Any, Dict, List, Optional


def _plain_text(runs: Optional[List[Dict[str, Any]]]) -> str:
    if not runs:
        return ""
    return "".join(r.get("plain_text") or "" for r in runs if isinstance(r, dict))


def get_value(prop: Optional[Dict[str, Any]]) -> Any:
    """
    Flatten one Notion property into a primitive.

    title/rich_text -> joined plain text, select -> option name,
    number -> the number ("" only when unset; 0 is kept),
    checkbox -> bool, anything else -> "".
    """
    if not prop or not isinstance(prop, dict):
        return ""

    ptype = prop.get("type")
    if ptype == "title":
        return _plain_text(prop.get("title"))
    if ptype == "rich_text":
        return _plain_text(prop.get("rich_text"))
    if ptype == "select":
        option = prop.get("select") or {}
        return option.get("name") or ""
    if ptype == "number":
        number = prop.get("number")
        return "" if number is None else number
    if ptype == "checkbox":
        return prop.get("checkbox")
    return ""


def get_images(prop: Optional[Dict[str, Any]]) -> List[str]:
    """URLs from a files property, in source order. Unresolvable entries are dropped."""
    if not prop or not isinstance(prop, dict):
        return []
    files = prop.get("files")
    if not files:
        return []

    urls: List[str] = []
    for f in files:
        if not isinstance(f, dict):
            continue
        url = (f.get("file") or {}).get("url") or (f.get("external") or {}).get("url")
        if url:
            urls.append(url)
    return urls
