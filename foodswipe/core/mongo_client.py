from pymongo import MongoClient
from foodswipe.core.config import settings

# MongoClient connects lazily, so importing this module never touches the network.
client = MongoClient(settings.MONGODB_URI)
db = client[settings.MONGO_DB_NAME]


def get_restaurant_collection():
    return db[settings.RESTAURANT_COLLECTION]
