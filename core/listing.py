# core/listing.py
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .models import DisplayItem
from .properties import get_images, get_value


@dataclass(frozen=True)
class ListingFields:
    """
    Notion property names feeding each display field. The inventory and
    collectibles databases were set up separately and name a few columns
    differently.
    """
    name: str = "Watch"
    brand: str = "Brand"
    model: str = "Model"
    ref: str = "Reference Number"
    price: str = "Asking Price"
    case_size: str = "Case Size"
    year: str = "Year"
    condition: str = "Condition"
    material: str = "Material"
    dial: str = "Dial Color"
    box_papers: str = "Box & Papers"
    extra: str = "Extra Details"
    images: str = "Images"


def _to_number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or value in ("", None):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _number_text(number: float) -> str:
    if number.is_integer():
        return str(int(number))
    return str(number)


def format_price(asking_price: Any) -> str:
    """12345 -> "$12,345". Unset, zero or unparseable prices read "Inquire"."""
    number = _to_number(asking_price)
    if not number:
        return "Inquire"
    rounded = round(number, 3)
    if rounded.is_integer():
        return f"${int(rounded):,}"
    return f"${rounded:,}"


def format_case_size(size: Any) -> str:
    number = _to_number(size)
    if not number:
        return ""
    return f"{_number_text(number)}mm"


def format_year(year: Any) -> str:
    number = _to_number(year)
    if not number:
        return ""
    # half-up, matching how the site has always shown fractional years
    return str(math.floor(number + 0.5))


def build_details(material: Any, dial: Any, case_size: str, extra: Any) -> str:
    """
    Card summary, e.g. "Steel, Black dial, 40mm, Box included."
    Empty parts are skipped; no parts means an empty string.
    """
    parts: List[str] = []
    if material:
        parts.append(str(material))
    if dial:
        parts.append(f"{dial} dial")
    if case_size:
        parts.append(case_size)
    if extra:
        parts.append(str(extra))
    if not parts:
        return ""
    return ", ".join(parts) + "."


def _text(value: Any) -> str:
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, (int, float)):
        return _number_text(float(value))
    return str(value)


def build_display_item(page: Dict[str, Any], fields: ListingFields) -> DisplayItem:
    props: Dict[str, Any] = page.get("properties") or {}

    brand = _text(get_value(props.get(fields.brand)))
    model = _text(get_value(props.get(fields.model)))
    name = _text(get_value(props.get(fields.name))) or f"{brand} {model}".strip()
    case_size = format_case_size(get_value(props.get(fields.case_size)))
    material = _text(get_value(props.get(fields.material)))
    dial = _text(get_value(props.get(fields.dial)))
    description = _text(get_value(props.get(fields.extra)))
    images = get_images(props.get(fields.images))

    return DisplayItem(
        id=page.get("id", ""),
        brand=brand,
        name=name,
        ref=_text(get_value(props.get(fields.ref))),
        price=format_price(get_value(props.get(fields.price))),
        details=build_details(material, dial, case_size, description),
        image=images[0] if images else "",
        images=images,
        year=format_year(get_value(props.get(fields.year))),
        condition=_text(get_value(props.get(fields.condition))),
        material=material,
        dial=dial,
        caseSize=case_size,
        contents="Box & Papers" if get_value(props.get(fields.box_papers)) else "Watch Only",
        description=description,
        model=model,
    )


def find_item(items: List[DisplayItem], item_id: str) -> Optional[DisplayItem]:
    return next((it for it in items if it.id == item_id), None)


def with_images(items: List[DisplayItem]) -> List[DisplayItem]:
    return [it for it in items if it.images]
