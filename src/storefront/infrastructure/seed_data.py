"""Demo catalog loaded by ``storefront product seed``."""

from __future__ import annotations


def _images(label: str) -> list[str]:
    return [
        f"https://placehold.co/800x600/1e90ff/f0f8ff?text={label}+View+{n}"
        for n in (1, 2, 3)
    ]


DEMO_PRODUCTS: list[dict] = [
    {
        "name": "Wireless Bluetooth Headphones",
        "description": "Over-ear wireless headphones with long battery life.",
        "long_description": (
            "Active noise cancellation, cushioned earcups and up to 30 hours "
            "of playback on a single charge."
        ),
        "price": "79.99",
        "image_url": "https://placehold.co/400x300/e0e0e0/333333?text=Headphones",
        "carousel_images": _images("Headphones"),
        "category": "Electronics",
        "rating": 4.5,
        "num_reviews": 120,
        "stock": 50,
        "specifications": {
            "Connectivity": "Bluetooth 5.0",
            "BatteryLife": "Up to 30 hours",
            "NoiseCancellation": "Active",
            "Weight": "250g",
        },
        "reviews": [
            {"author": "Alice Smith", "rating": 5, "comment": "Great sound, very comfortable."},
            {"author": "Bob Johnson", "rating": 4, "comment": "Good value for money."},
        ],
    },
    {
        "name": "Smart Fitness Tracker",
        "description": "Tracks steps, heart rate and sleep. Waterproof.",
        "price": "49.99",
        "image_url": "https://placehold.co/400x300/d0d0d0/222222?text=Fitness+Tracker",
        "carousel_images": _images("Tracker"),
        "category": "Wearables",
        "rating": 4.2,
        "num_reviews": 85,
        "stock": 75,
        "specifications": {
            "WaterResistance": "50m",
            "BatteryLife": "Up to 7 days",
            "Display": "Color AMOLED",
        },
        "reviews": [
            {"author": "Charlie Brown", "rating": 4, "comment": "Accurate tracking."},
        ],
    },
    {
        "name": "Portable Espresso Maker",
        "description": "Hand-pumped espresso maker for travel and the office.",
        "price": "34.50",
        "image_url": "https://placehold.co/400x300/c0c0c0/111111?text=Espresso+Maker",
        "carousel_images": _images("Espresso"),
        "category": "Home & Kitchen",
        "rating": 4.8,
        "num_reviews": 210,
        "stock": 30,
        "specifications": {
            "Operation": "Manual Pump",
            "Capacity": "60ml water, 7g ground coffee",
        },
    },
    {
        "name": "Ultra-Slim Power Bank 10000mAh",
        "description": "Pocket power bank with dual USB outputs and fast charging.",
        "price": "29.99",
        "image_url": "https://placehold.co/400x300/b0b0b0/000000?text=Power+Bank",
        "carousel_images": _images("PowerBank"),
        "category": "Electronics",
        "rating": 4.6,
        "num_reviews": 155,
        "stock": 90,
        "specifications": {
            "Capacity": "10000mAh",
            "OutputPorts": "2x USB-A",
            "FastCharging": "Yes (18W)",
        },
    },
    {
        "name": "Ergonomic Office Chair",
        "description": "Fully adjustable mesh office chair with lumbar support.",
        "price": "189.99",
        "image_url": "https://placehold.co/400x300/a0a0a0/EEEEEE?text=Office+Chair",
        "carousel_images": _images("Chair"),
        "category": "Furniture",
        "rating": 4.7,
        "num_reviews": 98,
        "stock": 20,
        "specifications": {
            "Material": "Mesh, Fabric, Steel",
            "WeightCapacity": "120kg",
        },
    },
    {
        "name": "Adjustable Dumbbell Set (5-52.5 lbs)",
        "description": "Space-saving dial-adjustable dumbbells.",
        "price": "299.99",
        "image_url": "https://placehold.co/400x300/909090/DDDDDD?text=Dumbbells",
        "carousel_images": _images("Dumbbells"),
        "category": "Sports & Outdoors",
        "rating": 4.8,
        "num_reviews": 100,
        "stock": 25,
        "specifications": {"WeightRange": "5-52.5 lbs", "Increments": 15},
    },
]
