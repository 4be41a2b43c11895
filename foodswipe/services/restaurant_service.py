# foodswipe/services/restaurant_service.py

import logging
import random
from datetime import datetime
from typing import Any, Dict, List, Optional

from bson import ObjectId

from foodswipe.core.mongo_client import get_restaurant_collection
from foodswipe.models.response_models import RestaurantPhoto

logger = logging.getLogger(__name__)

PHOTO_FIELDS = ["photo1", "photo2", "photo3", "photo4", "photo5"]
CATALOGUE_PROJECTION = {"restaurant_name": 1, "details": 1, "region": 1}


def serialize_document(value: Any) -> Any:
    """Make a Mongo document JSON friendly (ObjectId → str, datetime → ISO)."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: serialize_document(v) for k, v in value.items()}
    if isinstance(value, list):
        return [serialize_document(v) for v in value]
    return value


def find_restaurants(collection=None) -> List[Dict[str, Any]]:
    collection = collection if collection is not None else get_restaurant_collection()
    docs = [serialize_document(d) for d in collection.find()]
    logger.info("Found %d restaurants in the database", len(docs))
    return docs


def find_restaurant_catalogue(collection=None) -> List[Dict[str, Any]]:
    """Name, region and details only; enough to describe the catalogue to an LLM."""
    collection = collection if collection is not None else get_restaurant_collection()
    return [serialize_document(d) for d in collection.find({}, CATALOGUE_PROJECTION)]


def collect_photos(
    restaurants: List[Dict[str, Any]],
    rng: Optional[random.Random] = None,
) -> List[Dict[str, Any]]:
    """
    Flatten photo1..photo5 of every restaurant into one shuffled photo feed.
    Pass a seeded `rng` for a reproducible order.
    """
    rng = rng or random.Random()

    photos: List[Dict[str, Any]] = []
    for r in restaurants:
        restaurant_id = str(r.get("_id"))
        for n, field in enumerate(PHOTO_FIELDS, start=1):
            url = r.get(field)
            if not url:
                continue
            photos.append(
                RestaurantPhoto(
                    id=f"{restaurant_id}_photo{n}",
                    url=url,
                    restaurantId=restaurant_id,
                    restaurantName=r.get("restaurant_name") or "Unknown Restaurant",
                    address=r.get("address"),
                    region=r.get("region"),
                ).model_dump()
            )

    rng.shuffle(photos)
    return photos
