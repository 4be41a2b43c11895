import pytest
from bson import ObjectId

from main import create_app


@pytest.fixture
def client():
    app = create_app()
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def restaurant_docs():
    return [
        {
            "_id": ObjectId("64b7f0c2a1b2c3d4e5f60001"),
            "restaurant_name": "Noodle Bar",
            "region": "Shibuya",
            "details": "Hand-pulled noodles",
            "address": "1-2-3 Shibuya",
            "lat": 35.658,
            "lng": 139.701,
            "netLike": 12,
            "likeRatio": 0.9,
            "avgPrice": 1200,
            "photo1": "https://img.example.com/noodle-1.jpg",
            "photo2": "https://img.example.com/noodle-2.jpg",
        },
        {
            "_id": ObjectId("64b7f0c2a1b2c3d4e5f60002"),
            "restaurant_name": "Sushi Counter",
            "region": "Ginza",
            "details": "Omakase only",
            "lat": 35.671,
            "lng": 139.765,
            "netLike": 3,
            "likeRatio": 0.6,
            "avgPrice": 9000,
            "photo1": "https://img.example.com/sushi-1.jpg",
        },
        {
            "_id": ObjectId("64b7f0c2a1b2c3d4e5f60003"),
            "restaurant_name": None,
            "region": "Shinjuku",
            "details": "Late night curry",
            "photo3": "https://img.example.com/curry-3.jpg",
        },
    ]
