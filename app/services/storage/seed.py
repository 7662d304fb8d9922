"""Seed data loading."""
import logging
from pathlib import Path
from typing import List, Optional, Tuple

import yaml

from app.services.dishes.models import Dish
from app.services.orders.models import Order

logger = logging.getLogger(__name__)

DEFAULT_SEED_FILE = Path(__file__).parent.parent / "data" / "seed.yaml"


def load_seed_data(seed_file: Optional[str] = None) -> Tuple[List[Dish], List[Order]]:
    """Load dishes and orders from a YAML seed file.

    A missing file yields empty collections.
    """
    path = Path(seed_file) if seed_file else DEFAULT_SEED_FILE
    if not path.exists():
        logger.warning(f"[SEED] Seed file not found: {path}")
        return [], []

    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}

    dishes = [Dish(**dish) for dish in data.get("dishes", [])]
    orders = [Order.model_validate(order) for order in data.get("orders", [])]
    logger.info(f"[SEED] Loaded {len(dishes)} dishes and {len(orders)} orders from {path}")
    return dishes, orders
