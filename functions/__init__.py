# functions/__init__.py
from . import get_collectibles, get_inventory, submit_form

HANDLERS = {
    "get-inventory": get_inventory.handler,
    "get-collectibles": get_collectibles.handler,
    "submit-form": submit_form.handler,
}
