"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the API's validation rules and
match the field names of its Pydantic request schemas.
"""

import random
import uuid

from faker import Faker

fake = Faker()


def valid_email() -> str:
    """Generate unique emails that pass address normalisation."""
    local = fake.user_name()[:20].replace(".", "")
    return f"{local}.{uuid.uuid4().hex[:6]}@{fake.free_email_domain()}"


def valid_phone() -> str:
    area = random.randint(200, 999)
    prefix = random.randint(200, 999)
    line = random.randint(1000, 9999)
    return f"+1-{area}-{prefix}-{line}"


def registration_data() -> dict:
    """Generate a RegisterRequest payload."""
    return {
        "name": fake.name()[:100],
        "email": valid_email(),
        "password": fake.password(length=12),
        "address": fake.address().replace("\n", ", ")[:500],
        "phone": valid_phone(),
    }


def product_data(stock: int | None = None) -> dict:
    """Generate an AddProductRequest payload."""
    return {
        "name": f"{fake.color_name()} {fake.word().title()}"[:255],
        "description": fake.sentence(nb_words=12),
        "price": round(random.uniform(2.0, 250.0), 2),
        "category": random.choice(["Footwear", "Outerwear", "Kitchen", "Outdoor", "Home"]),
        "stock": stock if stock is not None else random.randint(20, 200),
    }


def search_params() -> dict:
    """Generate a catalogue listing query."""
    params = {"page": 1, "limit": random.choice([8, 12, 24])}
    if random.random() < 0.5:
        params["category"] = random.choice(["all", "footwear", "kitchen", "outdoor"])
    if random.random() < 0.3:
        params["sort_by"] = random.choice(["price", "name", "created_at"])
        params["order"] = random.choice(["asc", "desc"])
    return params
