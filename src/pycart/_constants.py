"""Internal constants shared across the library."""

BASE_URL = "http://localhost:3000"
USER_AGENT = "pycart/0.1"

INVENTORY_PATH = "/inventory"
CART_PATH = "/cart"


def cart_item_path(item_id: int) -> str:
    """Path of a single cart line."""
    return f"{CART_PATH}/{int(item_id)}"
